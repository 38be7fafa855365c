# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Utility functions for operating on the header of a text file.

"""

import re

__all__ = ['getMagicComments', 'parseModeline', 'parseEmacs']

modeline_regex = re.compile(r"-\*-\s*(.*?)\s*-\*-")


def getMagicComments(text, headersize=1024):
    """Given a string, get the first two lines.

    "Magic comments" appear in the first two lines of the file, and can
    indicate the encoding of the file or the major mode in which the file
    should be interpreted.
    """
    header = text[0:headersize]
    lines = header.splitlines()
    return lines[0:2]

def parseModeline(line):
    """Parse an emacs mode specifier from a single line.

    @return: two-tuple of the mode (or None) and a dict of the variables
    """
    match = modeline_regex.search(line)
    if not match:
        return None, {}
    mode = None
    vars = {}
    contents = match.group(1)
    if ":" not in contents:
        # short form, e.g. -*-C++-*-
        mode = contents.strip() or None
        return mode, vars
    for item in contents.split(";"):
        if ":" not in item:
            continue
        name, value = item.split(":", 1)
        name = name.strip().lower()
        value = value.strip()
        if name == "mode":
            mode = value
        elif name:
            vars[name] = value
    return mode, vars

def parseEmacs(header):
    """Determine if the header specifies a major mode.

    Parse a potential emacs major mode specifier line into the
    mode and the optional variables.  The mode may appears as any
    of::

      -*-pydisasm-*-
      -*- mode: pydisasm; -*-
      -*- mode: pydisasm; comment-column: 40; -*-

    @param header: first x characters of the file to be loaded
    @return: two-tuple of the mode and a dict of the name/value pairs.
    @rtype: tuple
    """
    lines = getMagicComments(header)
    for line in lines:
        mode, vars = parseModeline(line)
        if mode:
            return mode, vars
    return None, None
