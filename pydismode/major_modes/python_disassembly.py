# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Python bytecode disassembly editing support.

Major mode for editing the listings produced by the dis module or by
cross-version disassemblers like pydisasm.  Highlighting is performed by a
container lexer using the classifier in L{pydismode.lib.disasmlexer}, and
indentation follows the conventions of an assembler listing: labels and
block comments at the left margin, comments at the comment column, and
instructions at the first tab stop.
"""

import re

from pydismode.debug import *
from pydismode.major import *
from pydismode.plugin import IModePlugin
from pydismode.actions import *
from pydismode.stcbase import getLineText
from pydismode.lib.userparams import *
from pydismode.lib.stclexer import BaseLexer
from pydismode.lib.autoindent import BasicAutoindent
from pydismode.lib.disasmlexer import *


class PythonDisassemblyLexer(BaseLexer):
    """Container lexer that styles each line using the classifier"""
    styles = [
        (0, "default_style"),
        (1, "number_style"),
        (2, "keyword_style"),
        (3, "scalar_style"),
        (4, "class_style"),
        (5, "dockey_style"),
        (6, "global_style"),
        (7, "comment_style"),
        (8, "string_style"),
        ]

    style_map = {
        LINENO: 1,
        MNEMONIC: 2,
        JUMP_TARGET: 3,
        LABEL: 4,
        OPERAND_BYTE: 5,
        LABEL_REF: 6,
        COMMENT: 7,
        SOURCE: 8,
        }

    def __init__(self, comment_char='#', source_in_comments=False):
        self.comment_char = comment_char
        self.source_in_comments = source_in_comments

    def getEditraStyleSpecs(self):
        return self.styles

    def adjustStart(self, stc, start):
        col = stc.GetColumn(start)
        if col != 0:
            start = stc.PositionFromLine(stc.LineFromPosition(start))
        return start

    def iterStyles(self, stc, start, end):
        text = stc.GetTextRange(start, end)
        pos = start
        for span in iterLineSpans(text, start, self.comment_char, self.source_in_comments):
            if span.start > pos:
                yield pos, span.start - pos, 0
            yield span.start, span.end - span.start, self.style_map[span.category]
            pos = span.end
        if end > pos:
            yield pos, end - pos, 0


class PythonDisassemblyAutoindent(BasicAutoindent):
    """Indenter for assembler style listings.

    The indentation of a line only depends on its own text:

      - a label declaration goes to column zero
      - a block comment (three comment characters) goes to column zero
      - a comment (one comment character) goes to the comment column
      - everything else goes to the first tab stop

    Two comment characters aren't special and indent like an instruction.
    """
    reindent_on_return = True

    # Text in front of the cursor that is completed as a label by a colon
    bare_label_regex = re.compile(r"^[ \t]*[\w.$]+$")

    def __init__(self, comment_char='#', comment_column=32, tab_size=8):
        self.comment_char = comment_char
        self.comment_column = comment_column
        self.tab_size = tab_size

    def calculateIndentation(self, text):
        content = text.lstrip(" \t")
        if label_regex.match(content):
            return 0
        c = self.comment_char
        if content.startswith(c * 3):
            return 0
        if content.startswith(c) and not content.startswith(c * 2):
            return self.comment_column
        return self.tab_size

    def findIndentColumn(self, text):
        """Return the column at which the line should start.

        Errors never propagate to the editor; the line is placed at column
        zero instead.
        """
        try:
            return self.calculateIndentation(text)
        except Exception as e:
            assert self.dprint("Failed finding indent for %s: %s" % (repr(text), e))
            return 0

    def findIndent(self, stc, linenum):
        return self.findIndentColumn(getLineText(stc, linenum))

    def getElectricChars(self):
        return ":"

    def electricChar(self, stc, uchar):
        """Move a label to the left margin when its colon is typed."""
        if uchar != ':':
            return False
        pos = stc.GetCurrentPos()
        linestart = stc.PositionFromLine(stc.GetCurrentLine())
        before = stc.GetTextRange(linestart, pos)
        if not self.bare_label_regex.match(before):
            return False
        ws = len(before) - len(before.lstrip(" \t"))
        assert self.dprint("label=%s ws=%d" % (before.strip(), ws))
        stc.BeginUndoAction()
        try:
            if ws > 0:
                stc.SetTargetStart(linestart)
                stc.SetTargetEnd(linestart + ws)
                stc.ReplaceTarget("")
                stc.GotoPos(pos - ws)
            stc.AddText(uchar)
        finally:
            stc.EndUndoAction()
        return True


class PythonDisassemblyPrefs(MajorModePrefs):
    default_prefs = (
        CharParam('comment_char', '#', 'Character that starts a comment'),
        IntParam('comment_column', 32, 'Column at which comments are indented'),
        BoolParam('source_in_comments', False, 'Style the text of a comment as the\nsource code fragment that produced the instructions'),
        StrParam('extensions', 'dis pydis pyasm'),
        )


class PythonDisassemblyMode(MajorMode):
    """Major mode for editing Python bytecode disassembly listings.
    """
    keyword = 'pydisasm'
    emacs_synonyms = ['pydis', 'python-disassembly']

    prefs_class = PythonDisassemblyPrefs

    magic_regex = re.compile(r"^(# pydisasm version|# Python bytecode|Disassembly of)", re.MULTILINE)

    @classmethod
    def verifyMagic(cls, header):
        if cls.magic_regex.search(header[0:1024]):
            return True
        return None

    @classmethod
    def verifyPrefs(cls, prefs):
        MajorMode.verifyPrefs(prefs)
        c = prefs.comment_char
        if not isinstance(c, str) or len(c) != 1 or c.isspace():
            raise ValueError("comment_char must be a single non-blank character, not %s" % repr(c))
        if not isinstance(prefs.comment_column, int) or prefs.comment_column < 0:
            raise ValueError("comment_column must be a non-negative integer, not %s" % repr(prefs.comment_column))

    @classmethod
    def getLexer(cls, prefs):
        return PythonDisassemblyLexer(prefs.comment_char, prefs.source_in_comments)

    @classmethod
    def getAutoindent(cls, prefs):
        return PythonDisassemblyAutoindent(prefs.comment_char,
                                           prefs.comment_column, prefs.tab_size)

    @classmethod
    def getActions(cls):
        return [ElectricColon, ElectricReturn, Reindent, ToggleCommentRegion]


class PythonDisassemblyModePlugin(IModePlugin):
    """Plugin to register the Python disassembly mode.
    """
    def getMajorModes(self):
        yield PythonDisassemblyMode
