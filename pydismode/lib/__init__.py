"""Support modules that don't depend on the rest of pydismode.

These modules work with anything that emulates the relevant parts of the
wx.stc.StyledTextCtrl interface, so they can be tested without wxPython.
"""
