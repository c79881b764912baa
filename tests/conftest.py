from threading import Event

import pytest

from passgen.ui import BaseUI
from passgen.shell import BaseInput


@pytest.fixture()
def config_file(tmp_path):
    return tmp_path / 'test_passgen.conf'


@pytest.fixture()
def prepare_script(monkeypatch, capfd):

    script = []
    timeouted = Event()

    def check_captured():
        captured = capfd.readouterr()
        assert captured.err == ''
        out = captured.out
        while out:
            cmd = script.pop(0)
            out = cmd.expect(out)

    def expect_copy(_self, text):
        check_captured()
        cmd = script.pop(0)
        cmd.expect_copy(str(text))

    def feed_input(_self, prompt):
        check_captured()
        script.pop(0).expect(prompt)
        feed = script.pop(0).send()
        if timeouted.is_set():
            raise TimeoutError
        return feed

    def raise_timeout(*_args, **_kwargs):
        timeouted.set()

    def dummy(*_args, **_kwargs):
        pass

    monkeypatch.setattr(BaseUI, '_copy', expect_copy, raising=True)
    monkeypatch.setattr(BaseInput, '__init__', dummy, raising=True)
    monkeypatch.setattr(BaseInput, 'input', feed_input, raising=True)
    monkeypatch.setattr(BaseInput, 'cancel', raise_timeout, raising=True)

    def prepare(*script_items):
        script.extend(script_items)

    yield prepare

    check_captured()
    assert len(script) == 0
