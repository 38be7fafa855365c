# peppy Copyright (c) 2006-2010 Rob McMullen
# Licenced under the GPLv2; see http://peppy.flipturn.org for more info
"""Token classifier for Python bytecode disassembly listings.

The classifier works on one line at a time and has no dependencies on the
editing control, so it can be used outside of the editor.  A line is split
into non-overlapping L{Span}s using an ordered list of L{Rule}s, where the
earlier rule wins when two matches overlap.  Comments are located first;
the rules only ever see the text in front of the comment, and the comment
itself becomes a single span that reaches the end of the line.

A typical listing from the standard library's dis module looks like::

    Disassembly of <code object f at 0x7f, file "t.py", line 1>:
      2           0 LOAD_FAST                0 (x)
                  2 POP_JUMP_IF_FALSE        8 (to 8)
    L8:
      3     >>    8 LOAD_CONST               1 (None) # comment

and older listings from cross-version disassemblers may carry the raw
operand bytes, e.g. C{64|00}.
"""

import re

from pydismode.debug import *
from pydismode.lib.opnames import isMnemonic

__all__ = ['LINENO', 'MNEMONIC', 'JUMP_TARGET', 'LABEL', 'OPERAND_BYTE',
           'LABEL_REF', 'COMMENT', 'SOURCE', 'CATEGORIES', 'Span', 'Rule',
           'MnemonicRule', 'RULES', 'LineInfo', 'findCommentStart',
           'classifyLine', 'iterLineSpans', 'splitLine', 'label_regex']

#---- Categories ----#

LINENO = "lineno"
MNEMONIC = "mnemonic"
JUMP_TARGET = "jump_target"
LABEL = "label"
OPERAND_BYTE = "operand_byte"
LABEL_REF = "label_ref"
COMMENT = "comment"
SOURCE = "source"

CATEGORIES = (LINENO, MNEMONIC, JUMP_TARGET, LABEL, OPERAND_BYTE, LABEL_REF,
              COMMENT, SOURCE)

# Label declaration: optional indent, then identifier or offset, then a colon
label_regex = re.compile(r"^([ \t]*)([\w.$]+):")


class Span(tuple):
    """Classified region of a line: (start, end, category)

    start and end are character offsets with end exclusive, so the text
    of the span is text[start:end].
    """
    __slots__ = ()

    def __new__(cls, start, end, category):
        return tuple.__new__(cls, (start, end, category))

    start = property(lambda self: self[0])
    end = property(lambda self: self[1])
    category = property(lambda self: self[2])

    def __repr__(self):
        return "Span(%d, %d, %s)" % self

    def overlaps(self, start, end):
        return start < self[1] and self[0] < end

    def shift(self, offset):
        return Span(self[0] + offset, self[1] + offset, self[2])


class Rule(debugmixin):
    """Regular expression rule that tags one group of each match"""
    def __init__(self, regex, category, group=0, flags=0):
        self.regex = re.compile(regex, flags)
        self.category = category
        self.group = group

    def __repr__(self):
        return "Rule(%s, %s)" % (repr(self.regex.pattern), self.category)

    def iterMatches(self, text):
        """Generator returning (start, end) of each candidate region"""
        for match in self.regex.finditer(text):
            start, end = match.span(self.group)
            if start < end:
                yield start, end


class MnemonicRule(Rule):
    """Whole word rule that only accepts names from the opcode table"""
    def __init__(self, category):
        Rule.__init__(self, r"\b[A-Za-z_]\w*(?:\+\d+)?\b", category)

    def iterMatches(self, text):
        for match in self.regex.finditer(text):
            if isMnemonic(match.group(0)):
                yield match.span()


RULES = [
    # instruction offsets and source line numbers
    Rule(r"(?<= )\d+(?= )", LINENO),
    MnemonicRule(MNEMONIC),
    Rule(r"\(to \d+\)", JUMP_TARGET),
    Rule(label_regex.pattern, LABEL, 2),
    # Raw operand bytes in pre-versioned listings.  The bar is shared by
    # both bytes of a pair like 64|00, so only |00 gets tagged.
    Rule(r"\|[0-9a-fA-F]{2}", OPERAND_BYTE),
    Rule(r"[0-9a-fA-F]{2}\|", OPERAND_BYTE),
    Rule(r"L\d+(?= )", LABEL_REF),
    ]


def findCommentStart(text, comment_char='#'):
    """Return the index of the first comment character that isn't escaped
    with a backslash, or -1 if the line has no comment.
    """
    i = text.find(comment_char)
    while i >= 0:
        if i == 0 or text[i - 1] != '\\':
            return i
        i = text.find(comment_char, i + 1)
    return -1

def classifyLine(text, comment_char='#', source_in_comments=False, rules=None):
    """Split a single line into a sorted list of non-overlapping spans.

    @param text: line of text without the line ending
    @param comment_char: character that starts a comment
    @param source_in_comments: if True, the body of a comment is returned as
    a separate L{SOURCE} span after the L{COMMENT} span of the comment marker
    @param rules: optional list of rules to use instead of L{RULES}
    @return: list of L{Span}s sorted by starting position
    """
    if rules is None:
        rules = RULES
    comment = findCommentStart(text, comment_char)
    if comment >= 0:
        code = text[:comment]
    else:
        code = text

    spans = []
    for rule in rules:
        for start, end in rule.iterMatches(code):
            for span in spans:
                if span.overlaps(start, end):
                    break
            else:
                spans.append(Span(start, end, rule.category))
    spans.sort()

    if comment >= 0:
        end = len(text)
        if source_in_comments:
            body = comment
            while body < end and text[body] == comment_char:
                body += 1
            while body < end and text[body] in " \t":
                body += 1
            if body < end:
                spans.append(Span(comment, body, COMMENT))
                spans.append(Span(body, end, SOURCE))
                return spans
        spans.append(Span(comment, end, COMMENT))
    return spans

def iterLineSpans(text, offset=0, comment_char='#', source_in_comments=False):
    """Generator to classify multi-line text.

    Each line is classified independently, and the spans are shifted so
    that their positions are relative to the start of the text plus the
    offset.
    """
    for line in text.splitlines(True):
        stripped = line.rstrip("\r\n")
        for span in classifyLine(stripped, comment_char, source_in_comments):
            yield span.shift(offset)
        offset += len(line)


class LineInfo(object):
    """Structural view of a line of disassembly.

    @ivar indent: number of leading whitespace characters
    @ivar label: text of the label declaration, or None
    @ivar lineno: the source line number at the start of the line, or None
    @ivar spans: list of classified spans, see L{classifyLine}
    @ivar comment: (start, end) of the comment, or None
    """
    def __init__(self, text, comment_char='#'):
        self.text = text
        self.indent = len(text) - len(text.lstrip(" \t"))
        match = label_regex.match(text)
        if match:
            self.label = match.group(2)
        else:
            self.label = None
        self.spans = classifyLine(text, comment_char)
        self.lineno = None
        self.comment = None
        for span in self.spans:
            if span.category == LINENO and span.start == self.indent:
                self.lineno = int(text[span.start:span.end])
            elif span.category == COMMENT:
                self.comment = (span.start, span.end)

    def __repr__(self):
        return "LineInfo(indent=%d, label=%s, lineno=%s, comment=%s)" % (self.indent, self.label, self.lineno, self.comment)

    def isBlank(self):
        return self.indent == len(self.text)

    def getContent(self):
        """Return the text following the leading whitespace"""
        return self.text[self.indent:]

def splitLine(text, comment_char='#'):
    return LineInfo(text, comment_char)
