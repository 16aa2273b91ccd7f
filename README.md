# foodemo

A tiny example application built around a *foo*: an object with an optional
numeric id and a set of settings that choose its style.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
foodemo
```

takes no options (apart from `-h`/`--help`) and prints one greeting for a foo
with id 42 in the standard style and one for a new, unsaved foo in the Bar
style:

```
Hello, number 42!
Hi world.
```

## Using it as a library

```python
from foodemo.foo import Foo, Settings, Style
from foodemo.main import greeting

saved = Foo(42, Settings())
fresh = Foo(None, Settings(style=Style.BAR))

saved.id                  # 42
saved.settings.style      # Style.STANDARD
fresh.id                  # None

greeting(saved)           # 'Hello, number 42!'
greeting(fresh, "world")  # 'Hi world.'
greeting(fresh)           # 'Hi number 0.'
```

- `Style` is an enum that chooses how a foo presents itself. `Style.STANDARD`
  is the default; `Style.BAR` is the alternative.
- `Settings` is a dataclass holding a foo's configuration. Its one field,
  `style`, defaults to `Style.STANDARD`.
- `Foo(id=None, settings=None)` makes a foo. `id` is `None` for a foo that has
  not been saved yet; when `settings` is omitted, default `Settings()` are
  used. The `settings` property returns the foo's settings and cannot be
  reassigned.
- `FooError` is the exception type for problems with a foo; its default
  message is `"Invalid foo"`.
- `greeting(foo, name=None)` returns the greeting text for a foo in its style:
  `"Hello, <subject>!"` for the standard style and `"Hi <subject>."` for the
  Bar style. Without a `name`, the subject is `number <id>`, with an unset id
  shown as 0.
- `main(argv=None)` is the entry point behind the `foodemo` command and
  returns 0.

## What it does not do

Although a foo's `id` marks whether it has been saved, the package has no
storage: nothing saves, loads or assigns ids to foos. Nothing in the package
raises `FooError` either; it is provided for callers to use.