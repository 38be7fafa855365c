# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Base class for major modes

A major mode describes how a type of text is highlighted and edited.  The
mode class itself holds no per-buffer state: L{MajorMode.activate} takes
the preferences for a buffer and returns a L{MajorModeSession} that bundles
the lexer, the autoindenter and the key bindings for that buffer.  Sessions
can't be modified after activation, so two buffers never share mutable
state through their mode.

The classmethods named verify* are used by the L{MajorModeMatcherDriver} to
determine which major mode to use when editing a file.
"""

import os, re, copy
from types import MappingProxyType

from pydismode.debug import *
from pydismode.lib.userparams import *
from pydismode.lib.stclexer import BaseLexer
from pydismode.lib.autoindent import BasicAutoindent

__all__ = ['MajorModePrefs', 'MajorMode', 'MajorModeSession']


class MajorModePrefs(InstancePrefs):
    """Preferences common to all major modes"""
    default_prefs = (
        StrParam('filename_regex', '', 'Regular expression used to match against the filename part of the URL.  Successful match indicates the major mode is compatible with the filename'),
        StrParam('extensions', '', 'List of filename extensions to match to this major mode.  This is matched after the regular expression, and a successful match indicates the mode is compatible with the filename'),
        IntParam('tab_size', 8, 'Number of columns between tab stops'),
        BoolParam('use_tabs', False, 'Indent using tab characters rather than spaces'),
        )


class MajorModeSession(object):
    """Immutable handle for a major mode activated on a buffer.

    @ivar mode: the L{MajorMode} subclass that created the session
    @ivar values: read-only mapping of the preference values fixed at
    activation time
    @ivar lexer: the L{BaseLexer} used to style the text
    @ivar autoindent: the L{BasicAutoindent} used for indentation
    @ivar key_bindings: read-only mapping of key names to action instances
    """
    __slots__ = ('mode', 'values', 'lexer', 'autoindent', 'key_bindings')

    def __init__(self, mode, prefs, lexer, autoindent, key_bindings):
        values = MappingProxyType(copy.deepcopy(prefs.getAll()))
        for name, value in (('mode', mode), ('values', values), ('lexer', lexer),
                            ('autoindent', autoindent),
                            ('key_bindings', MappingProxyType(key_bindings))):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError("%s is read-only" % self.__class__.__name__)

    def __delattr__(self, name):
        raise AttributeError("%s is read-only" % self.__class__.__name__)

    def __repr__(self):
        return "<%s %s: %s>" % (self.__class__.__name__, self.mode.keyword, sorted(self.key_bindings.keys()))

    def __getattr__(self, name):
        # Preference values are readable as session attributes, returned as
        # copies of the values fixed at activation time.
        if name.startswith('_'):
            raise AttributeError(name)
        values = object.__getattribute__(self, 'values')
        if name not in values:
            raise AttributeError("%s has no attribute %s" % (self.__class__.__name__, name))
        return copy.copy(values[name])

    def getPrefs(self):
        """Return a new preferences object holding the session's values.

        The object is independent of the session, so it can be modified and
        passed to L{MajorMode.activate} to create another session.
        """
        return self.mode.prefs_class(**copy.deepcopy(dict(self.values)))

    def getAction(self, key):
        """Return the action bound to the key, or None"""
        return self.key_bindings.get(key)


class MajorMode(debugmixin):
    """Base class for all major modes.

    Subclasses provide the lexer and autoindenter through L{getLexer} and
    L{getAutoindent}, the preferences class in L{prefs_class}, and the
    actions bound to keys in L{getActions}.
    """
    #: set to non-zero to activate debug printing for this class
    debuglevel = 0

    #: The single-word keyword representing this major mode
    keyword = 'Abstract_Major_Mode'

    #: If there are additional emacs synonyms for this mode, list them here as a string for a single synonym, or in a list of strings for multiple.
    emacs_synonyms = None

    #: Filenames are matched against this regex in the class method verifyFilename.  If no specific filenames, set to None
    regex = None

    #: The class used to hold the preferences of a session
    prefs_class = MajorModePrefs

    @classmethod
    def getSubclassHierarchy(cls):
        """Return the hierarchy of MajorMode subclasses

        Returns a list containing only subclasses of MajorMode without any
        mixins or other classes in the inheritance tree.
        """
        return [c for c in cls.__mro__ if issubclass(c, MajorMode)]

    @classmethod
    def getDefaultPrefs(cls):
        return cls.prefs_class()

    @classmethod
    def verifyFilename(cls, filename, prefs=None):
        """Hook to verify filename matches the default regular
        expression for this mode.

        @param filename: the pathname part of the url (i.e. not the
        protocol, port number, query string, or anything else)

        @param prefs: preferences to use for the filename regex and the
        extension list, or None to use the defaults

        @returns: True if the filename matches
        """
        if prefs is None:
            prefs = cls.getDefaultPrefs()
        if cls.regex:
            match=re.search(cls.regex, filename)
            if match:
                return True
        if prefs.filename_regex:
            match=re.search(prefs.filename_regex, filename)
            if match:
                return True
        if prefs.extensions:
            exts = prefs.extensions.split()
            filename, ext = os.path.splitext(filename)
            return ext[1:] in exts
        return False

    @classmethod
    def verifyMagic(cls, header):
        """Hook to verify the file is acceptable to this mode.

        If the file can be identified by magic characters within the
        first n bytes (typically n < 1024), return a flag that
        indicates whether or not this file can be opened by this mode.

        @param header: string with the first n characters of the file

        @returns: True if the magic was identified exactly, False if
        the file is not capable of being opened by this mode, or None
        if indeterminate.
        """
        return None

    @classmethod
    def verifyKeyword(cls, keyword):
        """Hook to verify the mode's keyword or emacs alias matches the given
        string.

        @param keyword: text string that identifies a major mode

        @returns: boolean if the keyword matches either the keyword class
        attribute or one of the emacs aliases
        """
        if keyword is None:
            return False
        keyword = keyword.lower()
        if keyword == cls.keyword.lower():
            return True
        if cls.emacs_synonyms:
            if isinstance(cls.emacs_synonyms, str):
                if keyword == cls.emacs_synonyms.lower():
                    return True
            else:
                if keyword in [s.lower() for s in cls.emacs_synonyms]:
                    return True
        return False

    @classmethod
    def verifyPrefs(cls, prefs):
        """Check the preferences before they are used to create a session.

        @raises ValueError: if a preference has an unusable value
        """
        if not isinstance(prefs.tab_size, int) or prefs.tab_size < 1:
            raise ValueError("tab_size must be a positive integer, not %s" % repr(prefs.tab_size))

    @classmethod
    def getLexer(cls, prefs):
        return BaseLexer()

    @classmethod
    def getAutoindent(cls, prefs):
        return BasicAutoindent()

    @classmethod
    def getActions(cls):
        """Return the list of action classes bound to keys in a session"""
        return []

    @classmethod
    def activate(cls, prefs=None, plugins=(), platform='default'):
        """Activate the major mode for a buffer.

        @param prefs: instance of L{prefs_class}, or None to use the
        defaults.  The session gets its own copy, so later changes to the
        object passed in don't affect the session.

        @param plugins: list of L{IModePlugin} instances whose hooks are
        called during activation

        @param platform: name of the platform used to choose the key bindings
        of each action, like C{mac}.  Actions without an entry for the
        platform use their C{default} bindings.

        @returns: L{MajorModeSession}

        @raises ValueError: if a preference has an unusable value
        """
        if prefs is None:
            prefs = cls.getDefaultPrefs()
        else:
            prefs = copy.copy(prefs)
        plugins = list(plugins)
        for plugin in plugins:
            assert cls.dprint("preActivate: %s" % plugin)
            plugin.preActivate(cls, prefs)
        cls.verifyPrefs(prefs)

        key_bindings = {}
        session = MajorModeSession(cls, prefs, cls.getLexer(prefs),
                                   cls.getAutoindent(prefs), key_bindings)
        actions = list(cls.getActions())
        for plugin in plugins:
            actions.extend(plugin.getCompatibleActions(cls))
        for actcls in actions:
            action = actcls(session)
            for key in actcls.getKeyBindings(platform):
                key_bindings[key] = action
        cls.dprint("Activated %s" % repr(session))

        for plugin in plugins:
            assert cls.dprint("postActivate: %s" % plugin)
            plugin.postActivate(session)
        return session
