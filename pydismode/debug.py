# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""
Debug mixin and debug printing based on class hierarchy.

NOTE: inspect.stack() is used to determine the calling function at runtime,
which is slow.  Leave the debuglevel of a class at zero unless you're
actively working on it, and wrap debug calls in hot paths in an assert
statement so that they disappear entirely when running with python -O.
"""

import os, sys, inspect

dlogfh = sys.stderr
elogfh = sys.stderr

INSPECT = True

__all__ = ['debuglog', 'errorlog', 'dprint', 'eprint', 'wprint', 'debugmixin',
           'inspecton', 'inspectoff']


def debuglog(file):
    global dlogfh
    if hasattr(file, 'write'):
        dlogfh = file
    else:
        dlogfh = open(file, "w")

def errorlog(file):
    global elogfh
    if hasattr(file, 'write'):
        elogfh = file
    else:
        elogfh = open(file, "w")

def writeToLog(logfh, text, prefix=""):
    # Need to reference the 3rd caller from the top of the stack...  stack[0]
    # is writeToLog, stack[1] is dprint, and stack[2] is the function we're
    # interested in.
    caller = inspect.stack()[2]
    try:
        namespace = caller[0].f_locals
        if 'self' in namespace:
            cls = namespace['self'].__class__.__name__ + '.'
        else:
            cls = ''
        logfh.write("%s%s:%d %s%s: %s%s" % (prefix, os.path.basename(caller[1]), caller[2], cls, caller[3], text, os.linesep))
    finally:
        del caller

def dprint(str=''):
    if not INSPECT:
        dlogfh.write("%s%s" % (str, os.linesep))
    else:
        writeToLog(dlogfh, str)
    return True

def eprint(str=''):
    if not INSPECT:
        elogfh.write("ERROR: %s%s" % (str, os.linesep))
    else:
        writeToLog(elogfh, str, "ERROR: ")
    return True

def wprint(str=''):
    if not INSPECT:
        elogfh.write("WARNING: %s%s" % (str, os.linesep))
    else:
        writeToLog(elogfh, str, "WARNING: ")
    return True


class debugmixin(object):
    debuglevel = 0

    @classmethod
    def dprint(cls, str='', level=1):
        if not hasattr(cls, 'debuglevel') or cls.debuglevel >= level:
            if not INSPECT:
                dlogfh.write("%s%s" % (str, os.linesep))
                return True
            caller = inspect.stack()[1]
            try:
                dlogfh.write("%s:%d %s.%s: %s%s" % (os.path.basename(caller[1]), caller[2], cls.__name__, caller[3], str, os.linesep))
            finally:
                del caller
        return True


def inspecton():
    global INSPECT
    INSPECT = True

def inspectoff():
    global INSPECT
    INSPECT = False


if __name__ == "__main__":
    dprint('testing')

    class test(debugmixin):
        debuglevel = 1

        def method(self):
            assert self.dprint('need classname')

    t = test()
    t.method()
