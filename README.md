# uaparse

Parse user-agent strings into browser, operating system and device
information, using a `regexes.yaml` rule file in the uap-core format
(`user_agent_parsers`, `os_parsers` and `device_parsers` lists).

Rules are indexed by the literal snippets they require, so for each
user-agent only the rules that could possibly match are tried, in the order
they appear in the rule file. The first rule that matches wins.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from uaparse.parser import UserAgentParser

parser = UserAgentParser("uap-core/regexes.yaml")

ua = parser.parse(
    "Mozilla/5.0 (iPhone; CPU iPhone OS 5_1_1 like Mac OS X) "
    "AppleWebKit/534.46 (KHTML, like Gecko) Version/5.1 "
    "Mobile/9B206 Safari/7534.48.3"
)

ua.browser.family   # "Mobile Safari"
ua.browser.major    # "5"
ua.os.family        # "iOS"
ua.device.family    # "iPhone"
```

`parse` returns a frozen `UserAgent` with `device`, `os`, `browser` and the
original string in `ua`. Each part can also be parsed on its own with
`parse_browser`, `parse_os` and `parse_device`.

- `Agent` (browser and OS) has `family`, `major`, `minor`, `patch` and
  `patch_minor`.
- `Device` has `family`, `model` and `brand`.

When no rule matches, `family` is `"Other"` and the remaining fields are
empty strings. Version fields a matching rule does not provide are empty
strings. If parsing raises an error, the parse methods return these default
values instead of propagating it.

The rule file is read with PyYAML when the parser is created; an entry in
`device_parsers` with an unknown key or a `regex_flag` other than `i` raises
`ValueError`.

### Device class

A coarse device class is available without a rule file:

```python
from uaparse.parser import UserAgentParser, DeviceType

UserAgentParser.device_type(user_agent)
# DeviceType.TABLET, DeviceType.MOBILE, DeviceType.DESKTOP or DeviceType.UNKNOWN
```

### Building blocks

The lower-level pieces can be used directly:

- `uaparse.pattern.Pattern` / `Match` — search with captured groups, capped
  at ten (the whole match included).
- `uaparse.replace_template.ReplaceTemplate` — replacement text with `$0`
  to `$9` placeholders.
- `uaparse.alternatives.expand_alternatives` — expands `(a|b)` style
  alternatives into separate expressions.
- `uaparse.snippet_index.SnippetIndex` and
  `uaparse.snippet_mapping.SnippetMapping` — the snippet index used to pick
  candidate rules.

## Benchmark

Parse every line of a file of user-agent strings a number of times:

```
uaparse-bench uap-core/regexes.yaml useragents.txt 1000
```

The command prints nothing on success; time it with your shell's `time`.

## What it does not include

The package ships no rule file; a `regexes.yaml` must be supplied by the
caller. Expressions are compiled with Python's `re` module, and an
expression it cannot compile simply never matches.