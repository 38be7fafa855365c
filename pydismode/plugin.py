# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""
Base class for pydismode plugins
"""
from yapsy.IPlugin import IPlugin

from pydismode.debug import *

__all__ = ['IModePlugin']


class IModePlugin(IPlugin, debugmixin):
    """Use this interface to extend a major mode.

    All methods in this interface have default implementations, so it is only
    necessary to implement those methods that you need for your plugin.

    Plugins are passed explicitly to L{MajorMode.activate}; there is no
    global registry of hooks.  A plugin may either be instantiated directly or
    found by the yapsy plugin manager using a companion C{.yapsy-plugin} file
    that contains the metadata about the plugin, as in the following example::

        [Core]
        Name = mynewpluginname
        Module = newplugin

        [Documentation]
        Author = Your User Name
        Version = 0.1
        Description = my stupendous plugin

    The hooks are called in order during activation:

      1. L{preActivate} of every plugin, in the order they were given
      2. L{getCompatibleActions} of every plugin, to extend the key bindings
      3. L{postActivate} of every plugin, with the finished session

    @group interface: pre*, post*, get*
    """

    def getMajorModes(self):
        """Return list of major modes provided by the plugin.

        If this plugin provides any major modes, return a list or
        generator of all the major modes that this plugin is
        representing.  Generally, a plugin will only represent a
        single mode, but it is possible to represent more.
        """
        return []

    def preActivate(self, modecls, prefs):
        """Hook called before the session is created.

        The prefs object is a private copy for the new session, so the plugin
        is free to change it.  Changes made here are validated along with the
        rest of the preferences.

        @param modecls: the L{MajorMode} subclass being activated
        @param prefs: the session's L{InstancePrefs}
        """
        pass

    def getCompatibleActions(self, modecls):
        """Return list of additional actions for the major mode.

        Each action class declares its own key bindings; they are added to
        the session after the major mode's own actions, so a plugin can
        replace a default binding.

        @param modecls: the L{MajorMode} subclass being activated
        """
        return []

    def postActivate(self, session):
        """Hook called with the newly created session.

        The session is immutable, so this hook is a notification only.

        @param session: the L{MajorModeSession}
        """
        pass
