"""User agent parsing driven by a regexes YAML file.

Each parser list (browsers, operating systems, devices) is tried in file
order.  The first expression that matches fills the result.  An index of
mandatory snippets narrows down which expressions are tried at all.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from operator import attrgetter
from os import PathLike
from typing import Any, Generic, TypeVar

import yaml

from .alternatives import expand_alternatives
from .pattern import Match, Pattern
from .replace_template import ReplaceTemplate
from .snippet_index import SnippetIndex
from .snippet_mapping import SnippetMapping
from .stringutils import trim

DEFAULT_FAMILY = "Other"


class DeviceType(enum.Enum):
    """Coarse classification of the device behind a user agent."""

    UNKNOWN = "unknown"
    DESKTOP = "desktop"
    MOBILE = "mobile"
    TABLET = "tablet"


@dataclass(frozen=True)
class Device:
    """Device found in a user agent string."""

    family: str = DEFAULT_FAMILY
    model: str = ""
    brand: str = ""


@dataclass(frozen=True)
class Agent:
    """Browser or operating system found in a user agent string."""

    family: str = DEFAULT_FAMILY
    major: str = ""
    minor: str = ""
    patch: str = ""
    patch_minor: str = ""


@dataclass(frozen=True)
class UserAgent:
    """Everything parsed from one user agent string."""

    device: Device = field(default_factory=Device)
    os: Agent = field(default_factory=Agent)
    browser: Agent = field(default_factory=Agent)
    ua: str = ""


@dataclass(eq=False)
class _Store:
    index: int
    pattern: Pattern = field(default_factory=Pattern)
    replacement: ReplaceTemplate = field(default_factory=ReplaceTemplate)


@dataclass(eq=False)
class _AgentStore(_Store):
    major: ReplaceTemplate = field(default_factory=ReplaceTemplate)
    minor: ReplaceTemplate = field(default_factory=ReplaceTemplate)
    patch: ReplaceTemplate = field(default_factory=ReplaceTemplate)


@dataclass(eq=False)
class _DeviceStore(_Store):
    brand: ReplaceTemplate = field(default_factory=ReplaceTemplate)
    model: ReplaceTemplate = field(default_factory=ReplaceTemplate)


S = TypeVar("S", bound=_Store)


class _Catalogue(Generic[S]):
    """Ordered expressions of one kind together with their snippet index."""

    def __init__(self) -> None:
        self.stores: list[S] = []
        self._index = SnippetIndex()
        self._mapping: SnippetMapping[S] = SnippetMapping()

    def next_index(self) -> int:
        return len(self.stores) + 1

    def add(self, store: S) -> None:
        self.stores.append(store)

    def register(self, regex: str, store: S) -> None:
        for expression in expand_alternatives(regex):
            snippets = self._index.register_snippets(expression)
            self._mapping.add_mapping(snippets, store)

    def first_match(self, ua: str) -> tuple[S, Match] | None:
        candidates = self._mapping.get_expressions(self._index.get_snippets(ua))
        for store in sorted(candidates, key=attrgetter("index")):
            match = store.pattern.match(ua)
            if match is not None:
                return store, match
        return None


def _scalar(value: Any) -> str:
    return "" if value is None else str(value)


def _entries(node: Any) -> list[Any]:
    return node if isinstance(node, list) else []


class _Keys:
    def __init__(self, family: str, major: str, minor: str, patch: str):
        self.family = family
        self.major = major
        self.minor = minor
        self.patch = patch


_BROWSER_KEYS = _Keys(
    "family_replacement", "v1_replacement", "v2_replacement", "v3_replacement"
)
_OS_KEYS = _Keys(
    "os_replacement", "os_v1_replacement", "os_v2_replacement", "os_v3_replacement"
)


def _add_agent(node: Any, keys: _Keys, catalogue: _Catalogue[_AgentStore]) -> None:
    if not isinstance(node, dict):
        raise ValueError(f"agent parser entry is not a mapping: {node!r}")
    store = _AgentStore(index=catalogue.next_index())
    catalogue.add(store)
    for raw_key, raw_value in node.items():
        key = _scalar(raw_key)
        value = _scalar(raw_value)
        if key == "regex":
            store.pattern = Pattern(value)
            catalogue.register(value, store)
        elif key == keys.family:
            store.replacement = ReplaceTemplate(value)
        elif key == keys.major and value:
            if value != "$2":
                store.major = ReplaceTemplate(value)
        elif key == keys.minor and value:
            if value != "$3":
                store.minor = ReplaceTemplate(value)
        elif key == keys.patch and value:
            if value != "$4":
                store.patch = ReplaceTemplate(value)
        # Any other key is ignored.


def _add_device(node: Any, catalogue: _Catalogue[_DeviceStore]) -> None:
    if not isinstance(node, dict):
        raise ValueError(f"device parser entry is not a mapping: {node!r}")
    store = _DeviceStore(index=catalogue.next_index())
    catalogue.add(store)

    regex = ""
    case_insensitive = False
    for raw_key, raw_value in node.items():
        key = _scalar(raw_key)
        value = _scalar(raw_value)
        if key == "regex":
            regex = value
        elif key == "regex_flag":
            if value == "i":
                case_insensitive = True
            else:
                raise ValueError(f"unsupported regex_flag: {value!r}")
        elif key == "device_replacement":
            store.replacement = ReplaceTemplate(value)
        elif key == "model_replacement":
            store.model = ReplaceTemplate(value)
        elif key == "brand_replacement":
            store.brand = ReplaceTemplate(value)
        else:
            raise ValueError(f"unknown device parser key: {key!r}")

    store.pattern = Pattern(regex, case_sensitive=not case_insensitive)
    catalogue.register(regex, store)


def _group_or_template(template: ReplaceTemplate, match: Match) -> str:
    if template.empty and len(match) > 1:
        return match.get(1)
    return template.expand(match)


def _version(template: ReplaceTemplate, match: Match, group: int) -> str:
    if not template.empty:
        return template.expand(match)
    if len(match) > group:
        return match.get(group)
    return ""


def _agent_from(store: _AgentStore, match: Match) -> Agent:
    patch_minor = ""
    if len(match) == 6:
        fifth = match.get(5)
        if not fifth.startswith("."):
            patch_minor = fifth
    return Agent(
        family=trim(_group_or_template(store.replacement, match)),
        major=_version(store.major, match, 2),
        minor=_version(store.minor, match, 3),
        patch=_version(store.patch, match, 4),
        patch_minor=patch_minor,
    )


_MOBILE = Pattern(
    "Mobile|iP(hone|od|ad)|Android|BlackBerry|IEMobile|Kindle|NetFront|Silk-"
    "Accelerated|(hpw|web)OS|Fennec|Minimo|Opera "
    "M(obi|ini)|Blazer|Dolfin|Dolphin|Skyfire|Zune"
)
_TABLET = Pattern("(tablet|ipad|playbook|silk)|(android.*)", case_sensitive=False)


class UserAgentParser:
    """Parses user agent strings with the expressions of a regexes file."""

    def __init__(self, regexes_file_path: str | PathLike[str]):
        self.regexes_file_path = regexes_file_path
        with open(regexes_file_path, encoding="utf-8") as handle:
            regexes = yaml.load(handle, Loader=yaml.BaseLoader)
        if not isinstance(regexes, dict):
            regexes = {}

        self._browsers: _Catalogue[_AgentStore] = _Catalogue()
        self._oses: _Catalogue[_AgentStore] = _Catalogue()
        self._devices: _Catalogue[_DeviceStore] = _Catalogue()

        for node in _entries(regexes.get("user_agent_parsers")):
            _add_agent(node, _BROWSER_KEYS, self._browsers)
        for node in _entries(regexes.get("os_parsers")):
            _add_agent(node, _OS_KEYS, self._oses)
        for node in _entries(regexes.get("device_parsers")):
            _add_device(node, self._devices)

    def _device(self, ua: str) -> Device:
        found = self._devices.first_match(ua)
        if found is None:
            return Device()
        store, match = found
        brand = trim(store.brand.expand(match)) if not store.brand.empty else ""
        return Device(
            family=trim(_group_or_template(store.replacement, match)),
            model=trim(_group_or_template(store.model, match)),
            brand=brand,
        )

    @staticmethod
    def _agent(catalogue: _Catalogue[_AgentStore], ua: str) -> Agent:
        found = catalogue.first_match(ua)
        if found is None:
            return Agent()
        return _agent_from(*found)

    def parse(self, ua: str) -> UserAgent:
        """Parse device, operating system and browser of ``ua``."""
        try:
            return UserAgent(
                device=self._device(ua),
                os=self._agent(self._oses, ua),
                browser=self._agent(self._browsers, ua),
                ua=ua,
            )
        except Exception:
            return UserAgent()

    def parse_device(self, ua: str) -> Device:
        """Parse only the device of ``ua``."""
        try:
            return self._device(ua)
        except Exception:
            return Device()

    def parse_os(self, ua: str) -> Agent:
        """Parse only the operating system of ``ua``."""
        try:
            return self._agent(self._oses, ua)
        except Exception:
            return Agent()

    def parse_browser(self, ua: str) -> Agent:
        """Parse only the browser of ``ua``."""
        try:
            return self._agent(self._browsers, ua)
        except Exception:
            return Agent()

    @staticmethod
    def device_type(ua: str) -> DeviceType:
        """Classify ``ua`` as tablet, mobile or desktop."""
        try:
            tablet = _TABLET.match(ua)
            if tablet is not None and "Mobile" not in tablet.get(2):
                return DeviceType.TABLET
            if _MOBILE.match(ua) is not None:
                return DeviceType.MOBILE
            return DeviceType.DESKTOP
        except Exception:
            return DeviceType.UNKNOWN