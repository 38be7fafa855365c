# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Autoindent code for pydismode

This is a collection of autoindent code designed for use with the
wx.StyledTextCtrl or anything that emulates the part of its interface
listed in L{pydismode.stcbase}.  The helper functions that peppy provides
as STC methods (getLinesep, GetIndentString, etc.) are the functions in
L{pydismode.stcbase}, so no STC subclass is needed.
"""

from pydismode.debug import *
from pydismode.stcbase import getLinesep, getIndentString


class BasicAutoindent(debugmixin):
    """Simple autoindent that indents the line to the level of the line above it.

    This is about the bare minimum indenter.  It just looks at the line above
    it and reports the indent level of that line.  No effort is made to look
    at syntax or anything.  Simple.
    """

    # If True, processReturn reindents the line containing the caret before
    # breaking it, so the line that was just finished is cleaned up as well
    # as the new line.
    reindent_on_return = False

    def findIndent(self, stc, linenum):
        """Find proper indention of the line

        This is designed to be overridden in subclasses.

        @param linenum: line number
        @return: integer indicating number of columns to indent the line, or
        None if the line should be left alone
        """
        if linenum == 0:
            return None
        # look at indention of previous non-blank line
        ln = linenum - 1
        while ln > 0 and stc.GetLineIndentPosition(ln) == stc.GetLineEndPosition(ln):
            ln -= 1
        return stc.GetLineIndentation(ln)

    def reindentLine(self, stc, linenum=None):
        """Reindent the specified line to the correct level.

        Changes the indentation of the given line by inserting or deleting
        whitespace as required.  This operation is typically bound to the tab
        key, but regardless to the actual keypress to which it is bound is
        *only* called in response to a user keypress.

        @param stc: the stc of interest
        @param linenum: the line number, or None to use the current line
        @return: the new cursor position, in case the cursor has moved as a
        result of the indention.
        """
        if linenum is None:
            linenum = stc.GetCurrentLine()

        linestart = stc.PositionFromLine(linenum)

        # actual indention of current line
        pos = stc.GetCurrentPos()
        indpos = stc.GetLineIndentPosition(linenum) # absolute character position
        assert self.dprint("linestart=%d indpos=%d pos=%d" % (linestart, indpos, pos))

        newind = self.findIndent(stc, linenum)
        if newind is None:
            return pos

        # the target to be replaced is the leading indention of the
        # current line
        indstr = getIndentString(stc, newind)
        assert self.dprint("linenum=%d indstr='%s'" % (linenum, indstr))
        stc.SetTargetStart(linestart)
        stc.SetTargetEnd(indpos)
        stc.ReplaceTarget(indstr)

        # recalculate cursor position, because it may have moved if it
        # was within the target
        after = stc.GetLineIndentPosition(linenum)
        assert self.dprint("after: indent=%d cursor=%d" % (after, stc.GetCurrentPos()))
        if pos < linestart:
            return pos
        newpos = pos - indpos + after
        if newpos < linestart:
            # we were in the indent region, but the region was made smaller
            return after
        elif pos < indpos:
            # in the indent region
            return after
        return newpos

    def deleteWhitespaceBeforeCursor(self, stc):
        """Remove the spaces and tabs between the cursor and the previous
        non-blank character on the line.
        """
        pos = stc.GetCurrentPos()
        linestart = stc.PositionFromLine(stc.GetCurrentLine())
        before = stc.GetTextRange(linestart, pos)
        count = len(before) - len(before.rstrip(" \t"))
        if count > 0:
            stc.SetTargetStart(pos - count)
            stc.SetTargetEnd(pos)
            stc.ReplaceTarget("")
            stc.GotoPos(pos - count)

    def processReturn(self, stc):
        """Add a newline and indent to the proper tab level.

        Breaks the line at the caret, inserting the end-of-line characters of
        the document, and uses the findIndent method to indent the line that
        was just created.  If L{reindent_on_return} is set, the line being
        finished is reindented first and any whitespace left in front of the
        cursor is removed.

        @param stc: stc of interest
        """
        linesep = getLinesep(stc)

        stc.BeginUndoAction()
        try:
            if self.reindent_on_return:
                pos = self.reindentLine(stc)
                stc.GotoPos(pos)
                self.deleteWhitespaceBeforeCursor(stc)

            linenum = stc.GetCurrentLine()
            pos = stc.GetCurrentPos()
            assert self.dprint("format = %s pos=%d" % (repr(linesep), pos))

            stc.SetTargetStart(pos)
            stc.SetTargetEnd(pos)
            stc.ReplaceTarget(linesep)
            stc.GotoPos(pos + len(linesep))
            pos = self.reindentLine(stc, linenum + 1)
            stc.GotoPos(pos)
        finally:
            stc.EndUndoAction()

    def processTab(self, stc):
        stc.BeginUndoAction()
        try:
            assert self.dprint()
            pos = self.reindentLine(stc)
            stc.GotoPos(pos)
        finally:
            stc.EndUndoAction()

    def getElectricChars(self):
        """Return the characters that should be passed to L{electricChar}

        @return: string of characters, or an empty string if the autoindenter
        doesn't handle any characters specially
        """
        return ""

    def electricChar(self, stc, uchar):
        """Autoindent in response to a special character

        This is a hook to cause an autoindent on a particular character.
        Note that the hook can do more than that -- it can insert or delete
        characters as well.

        This takes its name from emacs, where "electric" meant that something
        else happened other than simply inserting the char.

        @param stc: stc instance

        @param uchar: unicode character that was just typed by the user (note
        that it hasn't been inserted into the document yet.)

        @return: True if this method handled the character and the text
        was modified; False if the calling event handler should handle the
        character.
        """
        return False
