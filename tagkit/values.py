"""Closed value sets for enumerated HTML attributes.

Each enum doubles as a whitelist for the validator and as a typed convenience
for callers: ``Form.tag().method(Method.POST)`` and ``method("post")`` render
the same markup. Member order is the order used in error messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Type


class Aria(str, Enum):
    """ARIA attribute names without the ``aria-`` prefix."""

    ATOMIC = "atomic"
    AUTOCOMPLETE = "autocomplete"
    BUSY = "busy"
    CHECKED = "checked"
    CONTROLS = "controls"
    CURRENT = "current"
    DESCRIBEDBY = "describedby"
    DESCRIPTION = "description"
    DETAILS = "details"
    DISABLED = "disabled"
    ERRORMESSAGE = "errormessage"
    EXPANDED = "expanded"
    FLOWTO = "flowto"
    HASPOPUP = "haspopup"
    HIDDEN = "hidden"
    INVALID = "invalid"
    KEYSHORTCUTS = "keyshortcuts"
    LABEL = "label"
    LABELLEDBY = "labelledby"
    LEVEL = "level"
    LIVE = "live"
    MODAL = "modal"
    MULTILINE = "multiline"
    MULTISELECTABLE = "multiselectable"
    ORIENTATION = "orientation"
    OWNS = "owns"
    PLACEHOLDER = "placeholder"
    POSINSET = "posinset"
    PRESSED = "pressed"
    READONLY = "readonly"
    RELEVANT = "relevant"
    REQUIRED = "required"
    ROLEDESCRIPTION = "roledescription"
    SELECTED = "selected"
    SETSIZE = "setsize"
    SORT = "sort"
    VALUEMAX = "valuemax"
    VALUEMIN = "valuemin"
    VALUENOW = "valuenow"
    VALUETEXT = "valuetext"


class Data(str, Enum):
    """Common ``data-*`` attribute names without the ``data-`` prefix."""

    ACTION = "action"
    ID = "id"
    NAME = "name"
    TARGET = "target"
    TOGGLE = "toggle"
    VALUE = "value"


class GlobalAttribute(str, Enum):
    """Attribute names valid on every HTML element."""

    ACCESSKEY = "accesskey"
    AUTOCAPITALIZE = "autocapitalize"
    AUTOFOCUS = "autofocus"
    CLASS = "class"
    CONTENTEDITABLE = "contenteditable"
    DIR = "dir"
    DRAGGABLE = "draggable"
    ENTERKEYHINT = "enterkeyhint"
    HIDDEN = "hidden"
    ID = "id"
    INERT = "inert"
    INPUTMODE = "inputmode"
    ITEMID = "itemid"
    ITEMPROP = "itemprop"
    ITEMREF = "itemref"
    ITEMSCOPE = "itemscope"
    ITEMTYPE = "itemtype"
    LANG = "lang"
    NONCE = "nonce"
    POPOVER = "popover"
    ROLE = "role"
    SPELLCHECK = "spellcheck"
    STYLE = "style"
    TABINDEX = "tabindex"
    TITLE = "title"
    TRANSLATE = "translate"


class Autocapitalize(str, Enum):
    OFF = "off"
    NONE = "none"
    ON = "on"
    SENTENCES = "sentences"
    WORDS = "words"
    CHARACTERS = "characters"


class ContentEditable(str, Enum):
    TRUE = "true"
    FALSE = "false"
    PLAINTEXT_ONLY = "plaintext-only"


class Direction(str, Enum):
    LTR = "ltr"
    RTL = "rtl"
    AUTO = "auto"


class Draggable(str, Enum):
    TRUE = "true"
    FALSE = "false"


class Translate(str, Enum):
    YES = "yes"
    NO = "no"


class Language(str, Enum):
    """ISO 639-1 codes accepted by the ``lang`` attribute."""

    ARABIC = "ar"
    BENGALI = "bn"
    CHINESE = "zh"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    FINNISH = "fi"
    FRENCH = "fr"
    GERMAN = "de"
    GREEK = "el"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    MALAY = "ms"
    NORWEGIAN = "no"
    PERSIAN = "fa"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SPANISH = "es"
    SWEDISH = "sv"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"


class Role(str, Enum):
    """WAI-ARIA landmark, widget and document structure roles."""

    ALERT = "alert"
    ALERTDIALOG = "alertdialog"
    APPLICATION = "application"
    ARTICLE = "article"
    BANNER = "banner"
    BUTTON = "button"
    CELL = "cell"
    CHECKBOX = "checkbox"
    COLUMNHEADER = "columnheader"
    COMBOBOX = "combobox"
    COMPLEMENTARY = "complementary"
    CONTENTINFO = "contentinfo"
    DEFINITION = "definition"
    DIALOG = "dialog"
    DOCUMENT = "document"
    FEED = "feed"
    FIGURE = "figure"
    FORM = "form"
    GRID = "grid"
    GRIDCELL = "gridcell"
    GROUP = "group"
    HEADING = "heading"
    IMG = "img"
    LINK = "link"
    LIST = "list"
    LISTBOX = "listbox"
    LISTITEM = "listitem"
    LOG = "log"
    MAIN = "main"
    MARQUEE = "marquee"
    MATH = "math"
    MENU = "menu"
    MENUBAR = "menubar"
    MENUITEM = "menuitem"
    MENUITEMCHECKBOX = "menuitemcheckbox"
    MENUITEMRADIO = "menuitemradio"
    NAVIGATION = "navigation"
    NONE = "none"
    NOTE = "note"
    OPTION = "option"
    PRESENTATION = "presentation"
    PROGRESSBAR = "progressbar"
    RADIO = "radio"
    RADIOGROUP = "radiogroup"
    REGION = "region"
    ROW = "row"
    ROWGROUP = "rowgroup"
    ROWHEADER = "rowheader"
    SCROLLBAR = "scrollbar"
    SEARCH = "search"
    SEARCHBOX = "searchbox"
    SEPARATOR = "separator"
    SLIDER = "slider"
    SPINBUTTON = "spinbutton"
    STATUS = "status"
    SWITCH = "switch"
    TAB = "tab"
    TABLE = "table"
    TABLIST = "tablist"
    TABPANEL = "tabpanel"
    TERM = "term"
    TEXTBOX = "textbox"
    TIMER = "timer"
    TOOLBAR = "toolbar"
    TOOLTIP = "tooltip"
    TREE = "tree"
    TREEGRID = "treegrid"
    TREEITEM = "treeitem"


class Crossorigin(str, Enum):
    ANONYMOUS = "anonymous"
    USE_CREDENTIALS = "use-credentials"


class Decoding(str, Enum):
    ASYNC = "async"
    AUTO = "auto"
    SYNC = "sync"


class Fetchpriority(str, Enum):
    AUTO = "auto"
    HIGH = "high"
    LOW = "low"


class Loading(str, Enum):
    EAGER = "eager"
    LAZY = "lazy"


class Referrerpolicy(str, Enum):
    NO_REFERRER = "no-referrer"
    NO_REFERRER_WHEN_DOWNGRADE = "no-referrer-when-downgrade"
    ORIGIN = "origin"
    ORIGIN_WHEN_CROSS_ORIGIN = "origin-when-cross-origin"
    SAME_ORIGIN = "same-origin"
    STRICT_ORIGIN = "strict-origin"
    STRICT_ORIGIN_WHEN_CROSS_ORIGIN = "strict-origin-when-cross-origin"
    UNSAFE_URL = "unsafe-url"


class Rel(str, Enum):
    ALTERNATE = "alternate"
    AUTHOR = "author"
    BOOKMARK = "bookmark"
    CANONICAL = "canonical"
    DNS_PREFETCH = "dns-prefetch"
    EXTERNAL = "external"
    HELP = "help"
    ICON = "icon"
    LICENSE = "license"
    MANIFEST = "manifest"
    ME = "me"
    MODULEPRELOAD = "modulepreload"
    NEXT = "next"
    NOFOLLOW = "nofollow"
    NOOPENER = "noopener"
    NOREFERRER = "noreferrer"
    OPENER = "opener"
    PINGBACK = "pingback"
    PRECONNECT = "preconnect"
    PREFETCH = "prefetch"
    PRELOAD = "preload"
    PREV = "prev"
    SEARCH = "search"
    STYLESHEET = "stylesheet"
    TAG = "tag"


class Target(str, Enum):
    BLANK = "_blank"
    SELF = "_self"
    PARENT = "_parent"
    TOP = "_top"


class Method(str, Enum):
    """Values for the ``method`` attribute of ``<form>``."""

    GET = "get"
    POST = "post"
    DIALOG = "dialog"


class Enctype(str, Enum):
    """Values for the ``enctype`` attribute of ``<form>``."""

    APPLICATION_X_WWW_FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART_FORM_DATA = "multipart/form-data"
    TEXT_PLAIN = "text/plain"


class Wrap(str, Enum):
    HARD = "hard"
    OFF = "off"
    SOFT = "soft"


class Colorspace(str, Enum):
    DISPLAY_P3 = "display-p3"
    LIMITED_SRGB = "limited-srgb"


class Capture(str, Enum):
    ENVIRONMENT = "environment"
    USER = "user"


class ButtonType(str, Enum):
    BUTTON = "button"
    RESET = "reset"
    SUBMIT = "submit"


class ButtonCommand(str, Enum):
    """Values for the ``command`` attribute of ``<button>``."""

    CLOSE = "close"
    HIDE_POPOVER = "hide-popover"
    REQUEST_CLOSE = "request-close"
    SHOW_MODAL = "show-modal"
    SHOW_POPOVER = "show-popover"
    TOGGLE_POPOVER = "toggle-popover"


class ShadowRootMode(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class InputType(str, Enum):
    BUTTON = "button"
    CHECKBOX = "checkbox"
    COLOR = "color"
    DATE = "date"
    DATETIME_LOCAL = "datetime-local"
    EMAIL = "email"
    FILE = "file"
    HIDDEN = "hidden"
    IMAGE = "image"
    MONTH = "month"
    NUMBER = "number"
    PASSWORD = "password"
    RADIO = "radio"
    RANGE = "range"
    RESET = "reset"
    SEARCH = "search"
    SUBMIT = "submit"
    TEL = "tel"
    TEXT = "text"
    TIME = "time"
    URL = "url"
    WEEK = "week"


def enum_values(enum_cls: Type[Enum]) -> List[str]:
    """Return the underlying values of an enum in declaration order."""

    return [str(member.value) for member in enum_cls]


def member_value(value: object) -> object:
    """Resolve an enum member to its value; leave anything else untouched."""

    if isinstance(value, Enum):
        return value.value
    return value


def normalize_values(values: Iterable[object]) -> List[object]:
    return [member_value(value) for value in values]


__all__ = [
    "Aria",
    "Autocapitalize",
    "ButtonCommand",
    "ButtonType",
    "Capture",
    "Colorspace",
    "ContentEditable",
    "Crossorigin",
    "Data",
    "Decoding",
    "Direction",
    "Draggable",
    "Enctype",
    "Fetchpriority",
    "GlobalAttribute",
    "InputType",
    "Language",
    "Loading",
    "Method",
    "Referrerpolicy",
    "Rel",
    "Role",
    "ShadowRootMode",
    "Target",
    "Translate",
    "Wrap",
    "enum_values",
    "member_value",
    "normalize_values",
]
