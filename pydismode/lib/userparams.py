#-----------------------------------------------------------------------------
# Name:        userparams.py
# Purpose:     instance preferences and serialization
#
# Author:      Rob McMullen
#
# Created:     2007
# RCS-ID:      $Id: $
# Copyright:   (c) 2007 Rob McMullen
# License:     wxWidgets
#-----------------------------------------------------------------------------
"""Helpers to create user preferences that can be saved to and loaded from
configuration files.

Preferences are declared as a tuple of Param objects in a class attribute
called default_prefs.  Subclasses inherit the params of their parent
classes, and can either redefine the defaults or add new parameters.  For
example:

  class EditorPrefs(InstancePrefs):
      default_prefs = (
          IntParam('tab_size', 8, 'Number of columns between tab stops'),
          BoolParam('use_tabs', False, 'Indent using tab characters'),
          )

  class AssemblerPrefs(EditorPrefs):
      default_prefs = (
          CharParam('comment_char', ';', 'Character that starts a comment'),
          IntParam('comment_column', 32, 'Column of trailing comments'),
          )

Each instance of a prefs class holds its own copy of the values as instance
attributes, so two instances never share state.  The user configuration is
read using the configparser module; the text found in the file is converted
to the expected type by the Param, so the user code only has to deal with
the expected type and doesn't have to do any conversion itself:

  [AssemblerPrefs]
  comment_char = #
  comment_column = 40
  tab_size = 4

"""

import os, locale
from configparser import ConfigParser

from pydismode.debug import *

__all__ = ['Param', 'BoolParam', 'IntParam', 'StrParam',
           'CharParam', 'InstancePrefs']


class Param(debugmixin):
    """Generic param interface.

    Param objects follow the lifetime of the class, and so are not
    typically destroyed until the end of the program.  That also means
    that they operate as flyweight objects with their state stored
    extrinsically in the prefs instance.

    It's important to understand the two representations of the param.
    What I call "text" is the textual representation that is stored in
    the user configuration file, and what I call "value" is the result
    of the conversion into the correct python type.  The value is what
    the python code operates on, and doesn't need to know anything about
    the textual representation.  These conversions are handled by the
    textToValue and valueToText methods.

    The default Param is a string param, and no restriction on the
    value of the string is imposed.
    """

    # class default to be used as the instance default if no other
    # default is provided.
    default = None

    def __init__(self, keyword, default=None, help='',
                 save_to_file=True, **kwargs):
        self.keyword = keyword
        if default is not None:
            self.default = default
        self.help = help
        self.save_to_file = save_to_file

        # User options are anything leftover in the kwargs dict.
        self.user_options = dict(kwargs)

    def __str__(self):
        return "keyword=%s, default=%s, help=%s" % (self.keyword,
        self.default, self.help)

    def textToValue(self, text):
        """Convert the user's config text to the type expected by the
        python code.

        Subclasses should return the type expected by the user code, and
        raise ValueError if the text can't be converted.
        """
        # The default implementation just returns a string with any
        # delimiting quotation marks removed.
        if text.startswith("'") or text.startswith('"'):
            text = text[1:]
        if text.endswith("'") or text.endswith('"'):
            text = text[:-1]
        return text

    def valueToText(self, value):
        """Convert the user value to a string suitable to be written
        to the config file.

        Subclasses should convert the value to a string that is
        acceptable to textToValue.
        """
        # The default string implementation adds quotation characters
        # to the string.
        if isinstance(value, str):
            value = '"%s"' % value
        return value

class BoolParam(Param):
    """Boolean parameter.

    Text uses one of 'yes', 'true', or '1' to represent the bool True,
    and anything else to represent False.
    """
    default = False

    yes_values = ["yes", "true", "1"]
    no_values = ["no", "false", "0"]

    def textToValue(self, text):
        """Return True if one of the yes values, otherwise False"""
        text = Param.textToValue(self, text).lower()
        if text in self.yes_values:
            return True
        return False

    def valueToText(self, value):
        """Convert the boolean value to a string"""
        if value:
            return self.yes_values[0]
        return self.no_values[0]

class IntParam(Param):
    """Int parameter.

    The text is converted through the locale atof conversion, then
    cast to an integer.
    """
    default = 0

    def textToValue(self, text):
        text = Param.textToValue(self, text)
        tmp = locale.atof(text)
        val = int(tmp)
        return val

    def valueToText(self, value):
        return str(value)

class StrParam(Param):
    """String parameter.

    This is an alias to the Param class.
    """
    default = ""

class CharParam(Param):
    """Single character parameter.

    The config text may be quoted, which is the only way to specify a
    whitespace character or one of configparser's comment prefixes.
    """

    def textToValue(self, text):
        text = Param.textToValue(self, text)
        if len(text) != 1:
            raise ValueError("%s must be a single character, not %s" % (self.keyword, repr(text)))
        return text


class InstancePrefs(debugmixin):
    """Base class for preferences stored as instance attributes.

    Every instance starts with the defaults of all the params declared in
    the default_prefs tuples of the class hierarchy, and may then be
    modified by reading a configuration file or by passing keyword
    arguments to the constructor.
    """
    default_prefs = []

    def __init__(self, **kwargs):
        self.setDefaultPrefs()
        for keyword, value in kwargs.items():
            if self.findParam(None, keyword) is None:
                raise TypeError("%s has no preference named %s" % (self.__class__.__name__, keyword))
            setattr(self, keyword, value)

    @classmethod
    def findParam(cls, section, option):
        hier = cls.__mro__
        for cls in hier:
            if "default_prefs" not in cls.__dict__:
                continue
            for param in cls.default_prefs:
                if param.keyword == option:
                    return param
        return None

    def iterPrefs(self):
        """Iterate over the params, most derived class first.

        A keyword redefined in a subclass is only returned once, using the
        subclass's param.
        """
        seen = set()
        hier = self.__class__.__mro__
        for cls in hier:
            if 'default_prefs' not in cls.__dict__:
                continue
            for param in cls.default_prefs:
                if param.keyword not in seen:
                    seen.add(param.keyword)
                    yield param

    def setDefaultPrefs(self):
        for param in self.iterPrefs():
            setattr(self, param.keyword, param.default)

    def isConfigChanged(self):
        for param in self.iterPrefs():
            if param.default != getattr(self, param.keyword):
                return True
        return False

    def getAll(self):
        """Return a dict of all the current keyword/value pairs"""
        return dict([(param.keyword, getattr(self, param.keyword)) for param in self.iterPrefs()])

    def readConfig(self, fh):
        """Set preferences from a configuration file.

        Values that can't be converted are reported as errors and the
        previous value of the preference is kept.  Options that don't name
        a preference are reported and ignored.
        """
        cfg = ConfigParser(interpolation=None)
        cfg.optionxform = str
        cfg.read_file(fh)
        for section in cfg.sections():
            for option, text in cfg.items(section):
                param = self.findParam(section, option)
                if param is None:
                    eprint("Unknown preference %s in section %s" % (option, section))
                    continue
                try:
                    val = param.textToValue(text)
                    if self.debuglevel > 0: dprint("Converted %s to %s(%s) for %s[%s]" % (text, val, type(val), section, option))
                    setattr(self, option, val)
                except Exception as e:
                    eprint("Error converting %s in section %s: %s" % (option, section, str(e)))

    def configToText(self):
        seen = {}
        lines = []

        hier = self.__class__.__mro__
        for cls in hier:
            if 'default_prefs' not in cls.__dict__:
                continue
            section = cls.__name__
            printed_section = False # flag to indicate if need to print header
            for param in cls.default_prefs:
                if param.keyword not in seen and param.save_to_file:
                    seen[param.keyword] = True
                    if not printed_section:
                        lines.append("[%s]" % section)
                        printed_section = True
                    val = getattr(self, param.keyword)
                    lines.append("%s = %s" % (param.keyword, param.valueToText(val)))
            if printed_section:
                lines.append("")
        text = os.linesep.join(lines)
        if self.debuglevel > 0: dprint(text)
        return text
