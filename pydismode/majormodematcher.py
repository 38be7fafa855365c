# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Match data to major modes that can edit that data

"""

from pydismode.lib.textutil import *

from pydismode.debug import *

__all__ = ['IgnoreMajorMode', 'MajorModeMatcherDriver']


class IgnoreMajorMode(RuntimeError):
    """Raise this exception within one of the MajorMode verify classmethods to
    skip further processing of the major mode in matching operations
    """
    pass

class MajorModeMatcherDriver(debugmixin):
    """Find the major mode that can edit a file.

    The driver holds the modes announced by a list of plugins, ordered most
    specific mode first.  Matching is done in order of decreasing certainty:
    an explicit keyword, an emacs modeline in the file, the filename, and
    finally the magic bytes at the start of the file.
    """
    def __init__(self, plugins):
        self.current_modes = self.findActiveModes(plugins)
        self.skipped_modes = set()
        self.dprint("Currently active major modes: %s" % str(self.current_modes))

    @classmethod
    def findActiveModes(cls, plugins):
        """Returns the list of major modes in most specific mode to most
        general mode order.

        Major modes have a hierarchy based on their subclass order, and it
        makes sense to start the search from the more specific subclass
        because it should return a positive match before its parent.  Modes
        that aren't related keep the order in which the plugins listed them.
        """
        modes = []
        for plugin in plugins:
            for mode in plugin.getMajorModes():
                if mode not in modes:
                    modes.append(mode)

        active_modes = []
        for mode in modes:
            # insert before the first mode that is a parent of this one
            for i, other in enumerate(active_modes):
                if issubclass(mode, other):
                    active_modes.insert(i, mode)
                    break
            else:
                active_modes.append(mode)
        return active_modes

    def iterActiveModes(self):
        for mode in self.current_modes:
            if mode not in self.skipped_modes:
                yield mode

    def ignoreMode(self, mode):
        self.dprint("Ignoring mode %s" % mode)
        self.skipped_modes.add(mode)

    def matchKeyword(self, keyword):
        """Search the list of active major modes for the mode named by the
        specified keyword.

        @param keyword: text string matched against the 'keyword' class
        attribute of the major mode

        @return: class of the matched major mode, or None if not found
        """
        for mode in self.iterActiveModes():
            if mode.verifyKeyword(keyword):
                return mode
        return None

    def match(self, filename=None, header=None, keyword=None):
        """Find the best major mode for a file.

        @param filename: name of the file, or None if unknown
        @param header: the first characters of the file as a string or bytes,
        or None if the file doesn't exist yet
        @param keyword: explicit mode keyword requested by the user

        @return: class of the matched major mode, or None if not found
        """
        self.skipped_modes = set()
        if keyword:
            mode = self.matchKeyword(keyword)
            self.dprint("matchKeyword matches %s" % mode)
            if mode:
                return mode

        if isinstance(header, bytes):
            header = header.decode('utf-8', 'replace')

        # An emacs mode specifier overrides anything determined out of the
        # filename
        if header:
            emacs_match = self.scanEmacs(header)
            self.dprint("scanEmacs matches %s" % emacs_match)
            if emacs_match:
                return emacs_match

        url_match = None
        if filename:
            modes = self.scanFilename(filename)
            self.dprint("scanFilename matches %s" % modes)
            if modes:
                if not header:
                    return modes[0]
                # If the filename matches more than one mode, prefer the mode
                # that positively identifies the contents
                for mode in modes:
                    if mode.verifyMagic(header):
                        return mode
                for mode in modes:
                    if mode.verifyMagic(header) is None:
                        url_match = mode
                        break

        if header:
            modes = self.scanMagic(header)
            self.dprint("scanMagic matches %s" % modes)
            if modes:
                # It is unlikely that multiple modes will match the same magic
                # values, so just load the first one that we find
                return modes[0]

        return url_match

    def scanFilename(self, filename):
        """Scan for filename match.

        @returns: list of matching L{MajorMode} subclasses
        """
        modes = []
        for mode in self.iterActiveModes():
            try:
                if mode.verifyFilename(filename):
                    modes.append(mode)
            except IgnoreMajorMode:
                self.ignoreMode(mode)
        return modes

    def scanMagic(self, header):
        """Scan for a pattern match in the first bytes of the file.

        Determine if there is a 'magic' pattern in the first n bytes
        of the file that can associate it with a major mode.

        @param header: first n characters of the file

        @returns: list of matching L{MajorMode} subclasses
        """
        modes = []
        for mode in self.iterActiveModes():
            try:
                if mode.verifyMagic(header):
                    modes.append(mode)
            except IgnoreMajorMode:
                self.ignoreMode(mode)
        return modes

    def scanEmacs(self, header):
        """Scan the first two lines of a file for an emacs mode
        specifier.

        @param header: first n characters of the file

        @returns: matching L{MajorMode} subclass or None
        """
        modename, settings = parseEmacs(header)
        self.dprint("modename = %s, settings = %s" % (modename, settings))
        if modename:
            for mode in self.iterActiveModes():
                if mode.verifyKeyword(modename):
                    return mode
        return None
