"""pydismode - Python bytecode disassembly major mode.

Syntax highlighting and line indentation for Python bytecode disassembly
listings, as printed by the standard C{dis} module or by third-party
disassemblers like C{pydisasm}.  The mode is built in the style of a peppy
major mode: a custom Scintilla lexer that styles text one line at a time, an
autoindenter that responds to return, tab and "electric" characters, and a
set of preferences that can be loaded from a configuration file.

Classifier
==========

The classifier in L{pydismode.lib.disasmlexer} maps a line of disassembly
text to an ordered list of non-overlapping L{Span}s, each tagged with a
category: instruction offsets, opcode mnemonics, jump targets, labels, hex
operand bytes and comments.  It is a pure function of the line text, so it
can be used without any editor at all.

Indenter
========

L{PythonDisassemblyAutoindent} decides the target column of a line: labels
and block comments flush left, simple comments at the comment column, and
everything else at the first tab stop.  The same object handles the smart
newline, smart colon and reindent commands.

Activation
==========

A major mode is activated for a buffer by passing a preferences object (and
optionally a list of plugins) to L{MajorMode.activate}.  The result is an
immutable L{MajorModeSession} that bundles the lexer, autoindenter and key
bindings for that buffer.

Choosing a mode
===============

Hosts pick the mode for a file with
L{pydismode.majormodematcher.MajorModeMatcherDriver}, created from the list
of plugins that provide major modes.  Its C{match} method takes the
filename, the first characters of the file and an optional mode keyword,
and returns the mode class to activate::

    driver = MajorModeMatcherDriver([PythonDisassemblyModePlugin()])
    mode = driver.match("listing.dis", header)
    if mode is not None:
        session = mode.activate(prefs)
"""

# setup.py requires that these be defined, and the OnceAndOnlyOnce
# principle is used here.  This is the only place where these values
# are defined in the source distribution, and everything else that
# needs this should grab it from here.
__author__ = "Rob McMullen"
__author_email__ = "robm@users.sourceforge.net"
__url__ = "http://peppy.flipturn.org/"
__description__ = "Python bytecode disassembly major mode"
__keywords__ = "text editor, disassembly, bytecode, scintilla"
__license__ = "GPL"
__version__ = "0.1.0"
