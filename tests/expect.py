import time
import re
from inspect import currentframe


class ScriptItem:

    def __init__(self):
        self._lineno = currentframe().f_back.f_back.f_lineno

    def __getattr__(self, item):
        raise AttributeError(f"{self!r}: unknown method '{item}'")


class Expect(ScriptItem):

    def __init__(self, expected, regex=False):
        """Match beginning of stdout against `expected`
        :param expected: Expected text
        :param regex: Match string as regex. Default is verbatim.
        """
        ScriptItem.__init__(self)
        self._expected = expected
        self._regex = regex

    def __repr__(self):
        return f"line {self._lineno}: {self.__class__.__name__}({self._expected!r})"

    def expect(self, actual):
        """Returns rest of `actual`, after the matched part."""
        if self._regex:
            m = re.match(self._expected, actual)
            assert m is not None, f"{repr(self)}, actual={actual!r}"
            return actual[m.end():]
        assert actual[:len(self._expected)] == self._expected, f"{repr(self)}, actual={actual!r}"
        return actual[len(self._expected):]


class ExpectCopy(ScriptItem):

    def __init__(self, expected: str):
        """Match clipboard (copy command) against `expected`"""
        ScriptItem.__init__(self)
        self._expected = expected

    def __repr__(self):
        return f"line {self._lineno}: {self.__class__.__name__}({self._expected!r})"

    def expect_copy(self, clipboard):
        assert clipboard == self._expected, repr(self)


class Send(ScriptItem):

    def __init__(self, text, delay=0):
        """Send `text` as user input, optionally after `delay` seconds"""
        ScriptItem.__init__(self)
        self._text = text
        self._delay = delay

    def __repr__(self):
        return "line %s: %s(%r)" % (self._lineno, self.__class__.__name__, self._text)

    def send(self):
        if self._delay:
            time.sleep(self._delay)
        return self._text
