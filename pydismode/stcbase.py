# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Utility functions for modifying the contents of a styled text control.

The editing commands don't own the text; they operate on a host control
that implements (a subset of) the wx.stc.StyledTextCtrl interface.  These
are the helpers that peppy's STC subclass provides as methods, rewritten as
functions taking the control as the first argument so that they work on any
compatible control.
"""

from pydismode.debug import *

__all__ = ['eol_map', 'getLinesep', 'getIndentString', 'getLineText',
           'getLineRegion', 'addLinePrefix',
           'removeLinePrefix', 'isLineCommented', 'commentRegion']

# Scintilla EOL modes: STC_EOL_CRLF, STC_EOL_CR, STC_EOL_LF
eol_map = {0: "\r\n", 1: "\r", 2: "\n"}


def getLinesep(stc):
    """Get the line separator string corresponding to the control's EOL mode
    """
    return eol_map.get(stc.GetEOLMode(), "\n")

def getIndentString(stc, ind):
    """Whitespace string that spans the given number of columns"""
    if stc.GetUseTabs():
        return (ind*' ').replace(stc.GetTabWidth()*' ', '\t')
    else:
        return ind*' '

def getLineText(stc, linenum):
    """Text of the line without the line ending"""
    start = stc.PositionFromLine(linenum)
    end = stc.GetLineEndPosition(linenum)
    return stc.GetTextRange(start, end)

def getLineRegion(stc):
    """Get current region, extending to current line if no region
    selected.

    If there's a region selected, extend it if necessary to
    encompass full lines.  If no region is selected, create one
    from the current line.
    """
    start, end = stc.GetSelection()
    if start == end:
        linestart = lineend = stc.GetCurrentLine()
    else:
        linestart = stc.LineFromPosition(start)
        lineend = stc.LineFromPosition(end - 1)

    start = stc.PositionFromLine(linestart)
    end = stc.GetLineEndPosition(lineend)
    stc.SetSelection(start, end)
    return (linestart, lineend)

def addLinePrefix(stc, start, prefix):
    """Insert the prefix at the start of the line.

    @param start: first character in line
    @param prefix: text to insert
    """
    stc.InsertText(start, prefix)

def removeLinePrefix(stc, start, prefix):
    """Remove the prefix from the start of the line.

    If the prefix doesn't match the characters at the start of the line,
    nothing is removed.

    @returns: True if the prefix was removed
    """
    slen = len(prefix)
    if slen > 0 and stc.GetTextRange(start, start+slen) == prefix:
        stc.SetTargetStart(start)
        stc.SetTargetEnd(start+slen)
        stc.ReplaceTarget("")
        return True
    return False

def isLineCommented(text, comment_char):
    """True if the line starts with the comment character or is blank"""
    return not text.strip() or text.startswith(comment_char)

def commentRegion(stc, comment_char, add=None):
    """Comment or uncomment all the lines in the region.

    Lines are commented by adding the comment character and a space at the
    start of each line.  When uncommenting, the comment character and an
    optional following space are removed.

    @param comment_char: character that starts a comment
    @param add: True to add comments, False to remove them, or None to
    toggle: remove the comments if all the non-blank lines in the region
    are commented, otherwise add them.
    @returns: True if comments were added
    """
    stc.BeginUndoAction()
    try:
        line, lineend = getLineRegion(stc)
        if add is None:
            add = False
            for ln in range(line, lineend + 1):
                if not isLineCommented(getLineText(stc, ln), comment_char):
                    add = True
                    break
        for ln in range(line, lineend + 1):
            start = stc.PositionFromLine(ln)
            if add:
                addLinePrefix(stc, start, comment_char + " ")
            else:
                prefix = comment_char
                if stc.GetTextRange(start, start + 2) == comment_char + " ":
                    prefix += " "
                removeLinePrefix(stc, start, prefix)
        stc.SetSelection(stc.PositionFromLine(line), stc.GetLineEndPosition(lineend))
    finally:
        stc.EndUndoAction()
    return add
