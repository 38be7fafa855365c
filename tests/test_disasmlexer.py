import pytest

from pydismode.lib.disasmlexer import *
from pydismode.lib.opnames import MNEMONICS, isMnemonic


def tokens(text, comment_char='#', source_in_comments=False):
    return [(text[s:e], cat) for s, e, cat in classifyLine(text, comment_char, source_in_comments)]


class TestMnemonics(object):
    def testSetSize(self):
        assert len(MNEMONICS) > 250
        assert isinstance(MNEMONICS, frozenset)

    @pytest.mark.parametrize("name", sorted(MNEMONICS))
    def testEveryMnemonic(self, name):
        assert tokens(name) == [(name, MNEMONIC)]

    def testCaseSensitive(self):
        assert tokens("load_fast") == []

    def testPartialWord(self):
        assert tokens("XLOAD_FAST LOAD_FASTER") == []

    def testSlicePlus(self):
        assert isMnemonic("SLICE+3")
        assert isMnemonic("STORE_SLICE+1")
        assert not isMnemonic("FOO+1")
        assert tokens("SLICE+2") == [("SLICE+2", MNEMONIC)]


class TestLineNumber(object):
    @pytest.mark.parametrize("digits", ["0", "7", "42", "123", "65536"])
    def testSurroundedBySpaces(self, digits):
        assert tokens(" %s " % digits) == [(digits, LINENO)]

    def testNotSurrounded(self):
        assert tokens("42") == []
        assert tokens(" 42") == []
        assert tokens("42 ") == []

    def testDisLine(self):
        text = "  2           0 LOAD_FAST                0 (x)"
        assert tokens(text) == [("2", LINENO), ("0", LINENO),
                                ("LOAD_FAST", MNEMONIC), ("0", LINENO)]


class TestJumpTarget(object):
    def testJump(self):
        assert tokens("(to 42)") == [("(to 42)", JUMP_TARGET)]

    def testNotNumber(self):
        assert tokens("(to abc)") == []

    def testInstruction(self):
        text = "          2 POP_JUMP_IF_FALSE        8 (to 8)"
        assert tokens(text) == [("2", LINENO), ("POP_JUMP_IF_FALSE", MNEMONIC),
                                ("8", LINENO), ("(to 8)", JUMP_TARGET)]


class TestLabel(object):
    @pytest.mark.parametrize("text", ["label_1:", "   label_1:", "\tlabel_1:"])
    def testIdentifier(self, text):
        assert tokens(text) == [("label_1", LABEL)]

    def testOffsets(self):
        assert tokens("L8:") == [("L8", LABEL)]
        assert tokens("  12:") == [("12", LABEL)]

    def testNotAtStart(self):
        assert tokens("x label:") == []

    def testLabelInfo(self):
        info = LineInfo("  L24:  # loop")
        assert info.label == "L24"
        assert info.indent == 2
        assert info.comment == (8, 14)


class TestOperandByte(object):
    def testBarBefore(self):
        assert tokens("|6a") == [("|6a", OPERAND_BYTE)]

    def testBarAfter(self):
        assert tokens("6A|") == [("6A|", OPERAND_BYTE)]

    def testPairTagsOneByte(self):
        # the bar is shared by both bytes, so the first byte is missed
        assert tokens("64|00") == [("|00", OPERAND_BYTE)]

    def testNotHex(self):
        assert tokens("zz|") == []


class TestLabelReference(object):
    def testOperand(self):
        text = "JUMP_ABSOLUTE L12 "
        assert tokens(text) == [("JUMP_ABSOLUTE", MNEMONIC), ("L12", LABEL_REF)]

    def testNeedsSpace(self):
        assert tokens("JUMP_ABSOLUTE L12") == [("JUMP_ABSOLUTE", MNEMONIC)]


class TestComment(object):
    def testWholeLine(self):
        assert tokens("# LOAD_FAST 1 ") == [("# LOAD_FAST 1 ", COMMENT)]

    def testTrailing(self):
        text = "RETURN_VALUE  # done"
        assert tokens(text) == [("RETURN_VALUE", MNEMONIC), ("# done", COMMENT)]

    def testEscaped(self):
        text = r"LOAD_CONST \# 3 # real"
        assert tokens(text) == [("LOAD_CONST", MNEMONIC), ("3", LINENO),
                                ("# real", COMMENT)]
        assert findCommentStart(text) == text.index("# real")

    def testOtherCommentChar(self):
        text = "NOP ; x = 1 # still comment"
        assert tokens(text, ';') == [("NOP", MNEMONIC),
                                     ("; x = 1 # still comment", COMMENT)]
        assert tokens("NOP # x", ';') == [("NOP", MNEMONIC)]

    def testSourceInComments(self):
        text = "LOAD_NAME # x = y + 1"
        assert tokens(text, source_in_comments=True) == [
            ("LOAD_NAME", MNEMONIC), ("# ", COMMENT), ("x = y + 1", SOURCE)]

    def testSourceInCommentsEmptyBody(self):
        assert tokens("###  ", source_in_comments=True) == [("###  ", COMMENT)]


class TestSpans(object):
    def testSortedAndDisjoint(self):
        text = "  3     >>    8 LOAD_CONST               1 (None) # L2 x"
        spans = classifyLine(text)
        for a, b in zip(spans, spans[1:]):
            assert a.end <= b.start
        for span in spans:
            assert span.start < span.end

    def testEarlierRuleWins(self):
        # "12" is both a label declaration and a line number candidate; the
        # line number rule has priority but needs a trailing space
        assert tokens(" 12: ") == [("12", LABEL)]
        assert tokens(" 12 ") == [("12", LINENO)]

    def testNoMatch(self):
        assert tokens("") == []
        assert tokens("   plain text") == []

    def testIdempotent(self):
        text = "L4:  LOAD_GLOBAL 0 (print) # call"
        assert classifyLine(text) == classifyLine(text)

    def testMultiLineOffsets(self):
        text = "NOP\r\n  L2:\nPOP_TOP"
        spans = list(iterLineSpans(text, 100))
        assert spans == [Span(100, 103, MNEMONIC), Span(107, 109, LABEL),
                         Span(111, 118, MNEMONIC)]
        assert [text[s - 100:e - 100] for s, e, c in spans] == ["NOP", "L2", "POP_TOP"]

    def testCustomRules(self):
        rules = [Rule(r"x+", "ex")]
        assert classifyLine("axxb", rules=rules) == [Span(1, 3, "ex")]


class TestLineInfo(object):
    def testInstruction(self):
        info = splitLine("  2           0 LOAD_FAST                0 (x)")
        assert info.lineno == 2
        assert info.label is None
        assert info.comment is None
        assert info.getContent().startswith("2 ")

    def testBlank(self):
        assert splitLine("  \t").isBlank()
        assert not splitLine(" x").isBlank()
