"""Pure python stand-in for the parts of wx.stc.StyledTextCtrl used by the
autoindenters, lexers and actions, plus helpers to run text based tests.

Positions are character offsets into the text.  Positions of the caret and
the anchor are updated on insertion and deletion the way Scintilla does it:
text inserted exactly at the caret doesn't move the caret, and the caret is
pulled back to the start of a deleted range that contained it.
"""
import re
from bisect import bisect_right

from pydismode.debug import *

__all__ = ['MockSTC', 'getSTC', 'prepareSTC', 'checkSTC', 'splittests']

eol_regex = re.compile(r"\r\n|\r|\n")


class MockSTC(object):
    def __init__(self, text="", tab_size=8, use_tabs=False, eol_mode=2):
        self.tab_size = tab_size
        self.use_tabs = use_tabs
        self.eol_mode = eol_mode
        self.undo_level = 0
        self.undo_actions = 0
        self.SetText(text)

    #### Text

    def SetText(self, text):
        self.text = text
        self.pos = self.anchor = 0
        self.target_start = self.target_end = 0
        self.styles = [0] * len(text)
        self.styling_pos = 0
        self.end_styled = 0

    def GetText(self):
        return self.text

    def GetTextLength(self):
        return len(self.text)
    GetLength = GetTextLength

    def GetTextRange(self, start, end):
        return self.text[start:end]

    def _movePositions(self, func):
        self.pos = func(self.pos)
        self.anchor = func(self.anchor)

    def _delete(self, start, end):
        count = end - start
        if count <= 0:
            return
        self.text = self.text[:start] + self.text[end:]
        del self.styles[start:end]
        def move(p):
            if p >= end:
                return p - count
            elif p > start:
                return start
            return p
        self._movePositions(move)
        self.end_styled = min(self.end_styled, start)

    def _insert(self, pos, text):
        count = len(text)
        self.text = self.text[:pos] + text + self.text[pos:]
        self.styles[pos:pos] = [0] * count
        def move(p):
            if p > pos:
                return p + count
            return p
        self._movePositions(move)
        self.end_styled = min(self.end_styled, pos)

    def InsertText(self, pos, text):
        if pos < 0:
            pos = self.pos
        self._insert(pos, text)

    def AddText(self, text):
        pos = self.pos
        self._insert(pos, text)
        self.pos = self.anchor = pos + len(text)

    def ReplaceSelection(self, text):
        start, end = self.GetSelection()
        self._delete(start, end)
        self._insert(start, text)
        self.pos = self.anchor = start + len(text)

    #### Target

    def SetTargetStart(self, pos):
        self.target_start = pos

    def SetTargetEnd(self, pos):
        self.target_end = pos

    def GetTargetStart(self):
        return self.target_start

    def GetTargetEnd(self):
        return self.target_end

    def ReplaceTarget(self, text):
        start, end = self.target_start, self.target_end
        self._delete(start, end)
        self._insert(start, text)
        self.target_end = start + len(text)
        return len(text)

    #### Caret and selection

    def GetCurrentPos(self):
        return self.pos

    def GetAnchor(self):
        return self.anchor

    def GotoPos(self, pos):
        self.pos = self.anchor = max(0, min(pos, len(self.text)))

    def SetSelection(self, start, end):
        self.anchor = start
        self.pos = end

    def GetSelection(self):
        return min(self.anchor, self.pos), max(self.anchor, self.pos)

    def GetCurrentLine(self):
        return self.LineFromPosition(self.pos)

    #### Lines

    def _lineStarts(self):
        starts = [0]
        for match in eol_regex.finditer(self.text):
            starts.append(match.end())
        return starts

    def GetLineCount(self):
        return len(self._lineStarts())

    def LineFromPosition(self, pos):
        return bisect_right(self._lineStarts(), pos) - 1

    def PositionFromLine(self, line):
        starts = self._lineStarts()
        if line >= len(starts):
            return len(self.text)
        return starts[line]

    def GetLineEndPosition(self, line):
        start = self.PositionFromLine(line)
        match = eol_regex.search(self.text, start)
        if match:
            return match.start()
        return len(self.text)

    def GetLine(self, line):
        starts = self._lineStarts()
        if line + 1 < len(starts):
            return self.text[starts[line]:starts[line + 1]]
        return self.text[self.PositionFromLine(line):]

    def GetColumn(self, pos):
        col = 0
        for c in self.text[self.PositionFromLine(self.LineFromPosition(pos)):pos]:
            if c == '\t':
                col = (col // self.tab_size + 1) * self.tab_size
            else:
                col += 1
        return col

    def GetLineIndentPosition(self, line):
        pos = self.PositionFromLine(line)
        end = self.GetLineEndPosition(line)
        while pos < end and self.text[pos] in " \t":
            pos += 1
        return pos

    def GetLineIndentation(self, line):
        return self.GetColumn(self.GetLineIndentPosition(line))

    #### Settings

    def GetTabWidth(self):
        return self.tab_size

    def SetTabWidth(self, width):
        self.tab_size = width

    def GetUseTabs(self):
        return self.use_tabs

    def SetUseTabs(self, flag):
        self.use_tabs = flag

    def GetEOLMode(self):
        return self.eol_mode

    def SetEOLMode(self, mode):
        self.eol_mode = mode

    #### Undo

    def BeginUndoAction(self):
        self.undo_level += 1

    def EndUndoAction(self):
        self.undo_level -= 1
        if self.undo_level == 0:
            self.undo_actions += 1

    #### Styling

    def StartStyling(self, pos):
        self.styling_pos = pos

    def SetStyling(self, length, style):
        end = self.styling_pos + length
        self.styles[self.styling_pos:end] = [style] * length
        self.styling_pos = end
        self.end_styled = max(self.end_styled, end)

    def GetStyleAt(self, pos):
        return self.styles[pos]

    def GetEndStyled(self):
        return self.end_styled

    def showStyle(self):
        """Return a printable representation of the text and its styles"""
        lines = []
        for line, start in enumerate(self._lineStarts()):
            end = self.GetLineEndPosition(line)
            lines.append(self.text[start:end])
            lines.append("".join([str(s % 10) for s in self.styles[start:end]]))
        return "\n".join(lines)


def getSTC(tab_size=8, use_tabs=False):
    return MockSTC(tab_size=tab_size, use_tabs=use_tabs)

def prepareSTC(stc, *pair):
    before = pair[0]
    print("*** before *** repr=%s\n%s" % (repr(before), before))
    cursor = before.find("|")
    stc.SetText(before)

    # change "|" to the cursor
    stc.SetTargetStart(cursor)
    stc.SetTargetEnd(cursor+1)
    stc.ReplaceTarget("")
    stc.GotoPos(cursor)

def checkSTC(stc, *pair):
    after = pair[1]

    # change cursor to "|"
    stc.ReplaceSelection("|")
    text = stc.GetText()
    if after == text:
        print("Matched:\n*** stc ***\n%s\n***\n%s\n***" % (text, after))
        return True
    print("Not matched:\n*** stc ***: repr=%s\n%s\n***\n*** should be ***: repr=%s\n%s\n***" % (repr(text), text, repr(after), after))
    return False

def splittests(text):
    tests = []

    # at least 4 '-' characters delimits a test
    groups = re.split('[\r\n]+-----*[\r\n]+', text)
    for test in groups:
        # 2 '-' characters delimits the before and after pair
        pair = re.split('[\r\n]+--[\r\n]+', test)
        if len(pair) == 2:
            tests.append(pair)
    return tests
