import pytest

from foodemo.foo import Foo, FooError, Settings, Style


def test_new_set_id():
    foo = Foo(42, Settings())
    assert foo.id == 42
    assert foo.settings.style == Style.STANDARD


def test_new_no_id():
    foo = Foo(None, Settings())
    assert foo.id is None
    assert foo.settings.style == Style.STANDARD


def test_default_foo():
    foo = Foo()
    assert foo.id is None
    assert foo.settings == Settings(style=Style.STANDARD)


def test_settings_are_kept():
    settings = Settings(style=Style.BAR)
    foo = Foo(7, settings)
    assert foo.settings is settings
    assert foo.settings.style == Style.BAR


def test_settings_is_read_only():
    foo = Foo(1, Settings())
    with pytest.raises(AttributeError):
        foo.settings = Settings(style=Style.BAR)


def test_default_style_is_standard():
    assert Settings().style == Style.STANDARD


def test_foo_error_message():
    with pytest.raises(FooError, match="Invalid foo"):
        raise FooError()
    assert str(FooError()) == "Invalid foo"