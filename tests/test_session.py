import pytest

from mock_stc import *

from pydismode.actions import *
from pydismode.major import MajorModeSession
from pydismode.plugin import IModePlugin
from pydismode.major_modes.python_disassembly import *


class RecordingPlugin(IModePlugin):
    def __init__(self, name, log):
        IModePlugin.__init__(self)
        self.name = name
        self.log = log

    def preActivate(self, modecls, prefs):
        self.log.append(("pre", self.name, modecls.keyword))

    def postActivate(self, session):
        self.log.append(("post", self.name, session.comment_char))


class WideCommentPlugin(IModePlugin):
    def preActivate(self, modecls, prefs):
        prefs.comment_column = 48


class BadCommentPlugin(IModePlugin):
    def preActivate(self, modecls, prefs):
        prefs.comment_char = ''


class UpcaseAction(TextModificationAction):
    alias = "upcase-line"
    name = "Upcase"
    key_bindings = {'default': 'C-c u'}

    def action(self, stc, multiplier=1):
        pass


class ExtraActionPlugin(IModePlugin):
    def getCompatibleActions(self, modecls):
        return [UpcaseAction]


class TestActivation(object):
    def testDefaults(self):
        session = PythonDisassemblyMode.activate()
        assert isinstance(session, MajorModeSession)
        assert session.mode is PythonDisassemblyMode
        assert session.comment_char == '#'
        assert session.comment_column == 32
        assert session.tab_size == 8
        assert session.use_tabs is False
        assert session.source_in_comments is False

    def testCallbacks(self):
        session = PythonDisassemblyMode.activate()
        assert isinstance(session.lexer, PythonDisassemblyLexer)
        assert isinstance(session.autoindent, PythonDisassemblyAutoindent)
        assert session.autoindent.comment_column == 32

    def testKeyBindings(self):
        session = PythonDisassemblyMode.activate()
        assert isinstance(session.key_bindings[':'], ElectricColon)
        assert isinstance(session.key_bindings['C-c ;'], ToggleCommentRegion)
        assert isinstance(session.key_bindings['RET'], ElectricReturn)
        assert isinstance(session.key_bindings['TAB'], Reindent)
        assert session.getAction('C-x C-f') is None
        for action in session.key_bindings.values():
            assert action.session is session

    def testPrefsCopied(self):
        prefs = PythonDisassemblyPrefs(comment_char=';', comment_column=40)
        session = PythonDisassemblyMode.activate(prefs)
        prefs.comment_char = '#'
        assert session.comment_char == ';'
        assert session.comment_column == 40
        assert session.lexer.comment_char == ';'

    def testSessionsIndependent(self):
        one = PythonDisassemblyMode.activate(PythonDisassemblyPrefs(comment_char=';'))
        two = PythonDisassemblyMode.activate()
        assert one.comment_char == ';'
        assert two.comment_char == '#'
        assert one.key_bindings[':'] is not two.key_bindings[':']

    def testUnknownPref(self):
        with pytest.raises(TypeError):
            PythonDisassemblyPrefs(comment_colour='red')
        with pytest.raises(AttributeError):
            PythonDisassemblyMode.activate().comment_colour


class TestImmutable(object):
    def setup_method(self, method):
        self.session = PythonDisassemblyMode.activate()

    def testSetAttribute(self):
        with pytest.raises(AttributeError):
            self.session.comment_char = ';'
        with pytest.raises(AttributeError):
            self.session.lexer = None
        with pytest.raises(AttributeError):
            del self.session.autoindent

    def testKeyBindingsReadOnly(self):
        with pytest.raises(TypeError):
            self.session.key_bindings[':'] = None

    def testValuesReadOnly(self):
        with pytest.raises(TypeError):
            self.session.values['comment_char'] = ';'
        assert not hasattr(self.session, 'prefs')

    def testPrefsFixedAtActivation(self):
        prefs = self.session.getPrefs()
        prefs.comment_char = ';'
        prefs.comment_column = -5
        assert self.session.comment_char == '#'
        assert self.session.comment_column == 32
        assert self.session.comment_char == self.session.lexer.comment_char
        assert self.session.comment_char == self.session.autoindent.comment_char

        stc = getSTC()
        stc.SetText("NOP")
        self.session.getAction('C-c ;').action(stc)
        assert stc.GetText() == "# NOP"

    def testGetPrefsActivatesAgain(self):
        prefs = self.session.getPrefs()
        assert isinstance(prefs, PythonDisassemblyPrefs)
        assert prefs.getAll() == dict(self.session.values)
        prefs.comment_char = ';'
        other = PythonDisassemblyMode.activate(prefs)
        assert other.comment_char == ';'
        assert self.session.comment_char == '#'


class TestInvalidPrefs(object):
    @pytest.mark.parametrize("char", ['', '##', ' ', None])
    def testCommentChar(self, char):
        prefs = PythonDisassemblyPrefs()
        prefs.comment_char = char
        with pytest.raises(ValueError):
            PythonDisassemblyMode.activate(prefs)

    def testCommentColumn(self):
        with pytest.raises(ValueError):
            PythonDisassemblyMode.activate(PythonDisassemblyPrefs(comment_column=-1))

    def testTabSize(self):
        with pytest.raises(ValueError):
            PythonDisassemblyMode.activate(PythonDisassemblyPrefs(tab_size=0))


class TestPlugins(object):
    def testHookOrder(self):
        log = []
        plugins = [RecordingPlugin("a", log), RecordingPlugin("b", log)]
        PythonDisassemblyMode.activate(plugins=plugins)
        assert log == [("pre", "a", "pydisasm"), ("pre", "b", "pydisasm"),
                       ("post", "a", "#"), ("post", "b", "#")]

    def testPreActivateChangesPrefs(self):
        prefs = PythonDisassemblyPrefs()
        session = PythonDisassemblyMode.activate(prefs, [WideCommentPlugin()])
        assert session.comment_column == 48
        assert session.autoindent.comment_column == 48
        assert prefs.comment_column == 32

    def testPreActivateValidated(self):
        with pytest.raises(ValueError):
            PythonDisassemblyMode.activate(plugins=[BadCommentPlugin()])

    def testExtraActions(self):
        session = PythonDisassemblyMode.activate(plugins=[ExtraActionPlugin()])
        assert isinstance(session.key_bindings['C-c u'], UpcaseAction)
        assert isinstance(session.key_bindings[':'], ElectricColon)

    def testModePlugin(self):
        plugin = PythonDisassemblyModePlugin()
        assert list(plugin.getMajorModes()) == [PythonDisassemblyMode]
        assert plugin.is_activated is False


class TestPlatformBindings(object):
    def testMac(self):
        session = PythonDisassemblyMode.activate(platform='mac')
        assert isinstance(session.key_bindings['C-3'], ToggleCommentRegion)
        assert 'C-c ;' not in session.key_bindings
        # actions without a mac entry use their default keys
        assert isinstance(session.key_bindings[':'], ElectricColon)

    def testDefault(self):
        session = PythonDisassemblyMode.activate()
        assert 'C-3' not in session.key_bindings
