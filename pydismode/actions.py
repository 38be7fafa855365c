# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Editing actions bound to keys by a major mode session

An action is created for each session and operates on whatever styled text
control the host passes to it, so one session can drive any number of
views of the same buffer.  Each action class lists the keys it wants in
its C{key_bindings} class attribute, using emacs style key names.
"""

from pydismode.debug import *
from pydismode.stcbase import commentRegion

__all__ = ['TextModificationAction', 'ElectricColon', 'ElectricReturn',
           'Reindent', 'ToggleCommentRegion']


class TextModificationAction(debugmixin):
    """Base class for any action that changes the text in the STC.

    @skip_translation
    """
    #: Alias name used to look up the action by name
    alias = None

    #: User visible name of the action
    name = None

    #: Keys bound to this action.  The value for each platform can be a
    #: string for a single key or a list of strings for multiple keys.
    key_bindings = {}

    def __init__(self, session):
        self.session = session

    def __str__(self):
        return "%s (%s)" % (self.name, self.alias)

    @classmethod
    def getKeyBindings(cls, platform='default'):
        """Return the list of keys for the platform"""
        keys = cls.key_bindings.get(platform, cls.key_bindings.get('default', []))
        if isinstance(keys, str):
            keys = [keys]
        return list(keys)

    def action(self, stc, multiplier=1):
        raise NotImplementedError


class ElectricColon(TextModificationAction):
    """Insert a colon, moving a label declaration to the left margin.

    If the text before the cursor is a single word, it's a label and the
    leading whitespace is removed as the colon is inserted.  Anywhere else
    the colon is inserted without any change to the line.
    """
    alias = "electric-colon"
    name = "Electric Colon"
    key_bindings = {'default': ':'}

    def action(self, stc, multiplier=1):
        autoindent = self.session.autoindent
        for i in range(multiplier):
            if autoindent.electricChar(stc, ':'):
                # If the autoindenter handles the char, it will insert the char.
                pass
            else:
                # If the autoindenter doesn't handle the character for some
                # reason, we are then left to insert it.
                stc.AddText(':')


class ElectricReturn(TextModificationAction):
    """Indent the next line following a return

    Using the autoindenter, reindent the line that was just finished and
    indent the next line to the appropriate level.
    """
    alias = "newline-and-indent"
    name = "Electric Return"
    key_bindings = {'default': ['RET', 'S-RET'],}

    def action(self, stc, multiplier=1):
        for i in range(multiplier):
            self.session.autoindent.processReturn(stc)


class Reindent(TextModificationAction):
    """Reindent a line or region.

    Recalculates the indentation for the selected region, using the current
    major mode's algorithm for indentation.
    """
    alias = "indent-for-tab-command"
    name = "Reindent"
    key_bindings = {'default': 'TAB',}

    def action(self, stc, multiplier=1):
        autoindent = self.session.autoindent
        start, end = stc.GetSelection()
        if start == end:
            assert self.dprint("no selection; cursor at %s" % start)
            autoindent.processTab(stc)
        else:
            assert self.dprint("selection: %s - %s" % (start, end))
            line = stc.LineFromPosition(start)
            end = stc.LineFromPosition(end)
            stc.BeginUndoAction()
            try:
                while line <= end:
                    autoindent.reindentLine(stc, linenum=line)
                    line += 1
                stc.SetSelection(stc.PositionFromLine(stc.LineFromPosition(start)),
                                 stc.GetLineEndPosition(end))
            finally:
                stc.EndUndoAction()


class ToggleCommentRegion(TextModificationAction):
    """Comment or uncomment a line or region.

    This will use the session's comment character to comment out entire
    blocks of lines.  The comment will start in column zero.  If every
    non-blank line is already commented, the comments are removed instead.
    """
    alias = "comment-region"
    name = "&Comment Region"
    key_bindings = {'default': 'C-c ;',
                    'mac': 'C-3',
                    }

    def action(self, stc, multiplier=1):
        if multiplier == 4:
            # emacs style C-u prefix forces the comments to be removed
            add = False
        else:
            add = None
        return commentRegion(stc, self.session.comment_char, add)
