# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""wx.stc.StyledTextCtrl that is driven by a major mode session

This is the only module that needs wxPython; it's installed with the C{wx}
extra.  Styling uses the session's lexer through the container lexer
interface, and keystrokes are dispatched to the actions in the session's key
bindings.  Positions in the STC are byte offsets into the UTF-8 encoded
text, so the styling is exact only for ASCII text.

Run this module as a script to open a file in a simple frame::

    python -m pydismode.wxstc listing.dis
"""

import sys

import wx
import wx.stc

from pydismode.debug import *
from pydismode.major_modes.python_disassembly import PythonDisassemblyMode

__all__ = ['getKeyName', 'PythonDisassemblySTC']


# Default colors for the Editra style names used by the lexers
style_colors = {
    "default_style": "fore:#000000",
    "number_style": "fore:#808080",
    "keyword_style": "fore:#00007F,bold",
    "scalar_style": "fore:#7F007F",
    "class_style": "fore:#0000FF,bold",
    "dockey_style": "fore:#007F7F",
    "global_style": "fore:#7F0000",
    "comment_style": "fore:#007F00,italic",
    "string_style": "fore:#007F00,back:#F0FFF0",
    }

special_keys = {
    wx.WXK_RETURN: "RET",
    wx.WXK_NUMPAD_ENTER: "RET",
    wx.WXK_TAB: "TAB",
    }


def getKeyName(keycode, ctrl=False, alt=False, shift=False):
    """Convert a keystroke to an emacs style key name.

    Shift is only included for the special keys, because for printable
    characters it's already part of the character.

    @return: key name like C{RET}, C{S-RET}, C{C-c} or C{:}, or None for
    keys that can't be bound
    """
    if keycode in special_keys:
        name = special_keys[keycode]
        if shift:
            name = "S-" + name
    elif 32 <= keycode < 127:
        name = chr(keycode)
        if ctrl or alt:
            name = name.lower()
    else:
        return None
    if alt:
        name = "M-" + name
    if ctrl:
        name = "C-" + name
    return name


class PythonDisassemblySTC(wx.stc.StyledTextCtrl, debugmixin):
    """Styled text control for editing Python disassembly listings.

    @param session: a L{MajorModeSession}, or None to activate
    L{PythonDisassemblyMode} with the default preferences
    """
    def __init__(self, parent, session=None, **kwargs):
        wx.stc.StyledTextCtrl.__init__(self, parent, -1, **kwargs)
        if session is None:
            if wx.Platform == "__WXMAC__":
                platform = "mac"
            else:
                platform = "default"
            session = PythonDisassemblyMode.activate(platform=platform)
        self.session = session
        self.key_prefix = None

        self.SetTabWidth(session.tab_size)
        self.SetUseTabs(session.use_tabs)
        self.SetIndent(session.tab_size)
        self.SetEdgeColumn(session.comment_column)
        self.setStyles(session.lexer.getEditraStyleSpecs())
        self.SetLexer(wx.stc.STC_LEX_CONTAINER)
        self.Bind(wx.stc.EVT_STC_STYLENEEDED, self.OnStyleNeeded)
        self.Bind(wx.EVT_KEY_DOWN, self.OnKeyDown)
        self.Bind(wx.EVT_CHAR, self.OnChar)

    def setStyles(self, specs):
        face = wx.Font(10, wx.FONTFAMILY_TELETYPE, wx.FONTSTYLE_NORMAL, wx.FONTWEIGHT_NORMAL).GetFaceName()
        self.StyleSetSpec(wx.stc.STC_STYLE_DEFAULT, "face:%s,size:10" % face)
        self.StyleClearAll()
        for num, name in specs:
            self.StyleSetSpec(num, style_colors.get(name, style_colors["default_style"]))

    def OnStyleNeeded(self, evt):
        """Event handler for custom lexer

        """
        self.session.lexer.styleText(self, self.GetEndStyled(), evt.GetPosition())

    def processKey(self, name):
        """Run the action bound to the key name.

        Handles emacs style two key sequences like C{C-c ;}.

        @return: True if the key was used
        """
        if self.key_prefix is not None:
            name = "%s %s" % (self.key_prefix, name)
            self.key_prefix = None
        action = self.session.getAction(name)
        if action is not None:
            assert self.dprint("key %s: %s" % (name, action))
            action.action(self)
            return True
        for key in self.session.key_bindings.keys():
            if key.startswith(name + " "):
                self.key_prefix = name
                return True
        return False

    def OnKeyDown(self, evt):
        name = getKeyName(evt.GetKeyCode(), evt.ControlDown(), evt.AltDown(), evt.ShiftDown())
        if name and (name in special_keys.values() or name.startswith(("C-", "M-", "S-")) or self.key_prefix):
            if self.processKey(name):
                return
        evt.Skip()

    def OnChar(self, evt):
        name = getKeyName(evt.GetKeyCode())
        if name and self.processKey(name):
            return
        evt.Skip()


if __name__ == "__main__":
    app = wx.App(False)
    frame = wx.Frame(None, -1, "pydismode", size=(800, 600))
    stc = PythonDisassemblySTC(frame)
    if len(sys.argv) > 1:
        with open(sys.argv[1]) as fh:
            stc.SetText(fh.read())
    frame.Show()
    app.MainLoop()
