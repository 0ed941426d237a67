import os
from decimal import Decimal, InvalidOperation

from dotenv import find_dotenv, load_dotenv

from finance_insights.logger import get_logger

logger = get_logger(__name__)


CONFIG_FILENAME = "config.yaml"

_CONFIG_FILE_PATH: str | None = None
_CONFIG_FILE_VALUES: dict[str, str] = {}
_EXTERNAL_ENV_KEYS: set[str] = set()

_CONFIG_KEYS = (
    "LOG_LEVEL",
    "LOG_DIR",
    "AUTO_SUGGEST_THRESHOLD",
    "BUDGET_ALERT_RATIO",
    "PROJECTED_SPENDING_THRESHOLD",
    "STRICT_MONTH_MATCHING",
    "SORT_TREND_INPUT",
    "SEED_DEMO_DATA",
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

DEFAULT_AUTO_SUGGEST_THRESHOLD = 0.6
DEFAULT_BUDGET_ALERT_RATIO = Decimal("0.8")
DEFAULT_PROJECTED_SPENDING_THRESHOLD = Decimal("1000")


def _resolve_dotenv_path() -> str | None:
    config_dir = os.getenv("CONFIG_DIR")
    if config_dir:
        candidate = os.path.join(config_dir, ".env")
        if os.path.exists(candidate):
            return candidate
    resolved = find_dotenv(usecwd=True)
    return resolved or None


def _resolve_config_path() -> str:
    config_dir = os.getenv("CONFIG_DIR")
    if config_dir:
        return os.path.join(config_dir, CONFIG_FILENAME)
    cwd = os.getcwd()
    candidate = os.path.join(cwd, "config", CONFIG_FILENAME)
    if os.path.exists(candidate):
        return candidate
    return os.path.join(cwd, CONFIG_FILENAME)


def _strip_inline_comment(raw_value: str) -> str:
    in_single = False
    in_double = False
    for index, char in enumerate(raw_value):
        if char == '"' and not in_single:
            in_double = not in_double
        elif char == "'" and not in_double:
            in_single = not in_single
        elif char == "#" and not in_single and not in_double:
            return raw_value[:index].rstrip()
    return raw_value


def _unquote_value(raw_value: str) -> str:
    if len(raw_value) >= 2 and raw_value[0] == raw_value[-1] and raw_value[0] in {'"', "'"}:
        return raw_value[1:-1]
    return raw_value


def read_config_file(path: str | None) -> dict[str, str]:
    """Read flat `KEY: value` lines; nested YAML is not supported."""
    if not path or not os.path.exists(path):
        return {}

    values: dict[str, str] = {}
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            key = key.strip()
            value = _unquote_value(_strip_inline_comment(raw_value).strip())
            if key and value:
                values[key] = value
    return values


def load_environment() -> None:
    global _CONFIG_FILE_PATH
    global _CONFIG_FILE_VALUES
    global _EXTERNAL_ENV_KEYS

    dotenv_path = _resolve_dotenv_path()
    if dotenv_path:
        load_dotenv(dotenv_path=dotenv_path, override=False)

    _EXTERNAL_ENV_KEYS = set(os.environ.keys())

    _CONFIG_FILE_PATH = _resolve_config_path()
    _CONFIG_FILE_VALUES = read_config_file(_CONFIG_FILE_PATH)

    for key in _CONFIG_KEYS:
        if key not in os.environ and key in _CONFIG_FILE_VALUES:
            os.environ[key] = _CONFIG_FILE_VALUES[key]


def get_config_path() -> str | None:
    return _CONFIG_FILE_PATH


def is_env_override(name: str) -> bool:
    return name in _EXTERNAL_ENV_KEYS


def get_env_float(
    name: str,
    default: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("[ENV] Invalid %s='%s', using default %s.", name, raw, default)
        return default
    if (min_value is not None and value < min_value) or (max_value is not None and value > max_value):
        logger.warning("[ENV] %s='%s' out of range, using default %s.", name, raw, default)
        return default
    return value


def get_env_decimal(name: str, default: Decimal, min_value: Decimal | None = None) -> Decimal:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        logger.warning("[ENV] Invalid %s='%s', using default %s.", name, raw, default)
        return default
    if not value.is_finite() or (min_value is not None and value < min_value):
        logger.warning("[ENV] %s='%s' out of range, using default %s.", name, raw, default)
        return default
    return value


def get_env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    logger.warning("[ENV] Invalid %s='%s', using default %s.", name, raw, default)
    return default


def log_environment() -> None:
    logger.info("[ENV] Configured environment (config file: %s).", _CONFIG_FILE_PATH or "<none>")
    for key in _CONFIG_KEYS:
        raw_value = os.getenv(key)
        value = "<unset>" if raw_value is None else raw_value.replace("\r", "\\r").replace("\n", "\\n")
        source = "env" if is_env_override(key) else "config"
        logger.info("[ENV] %s=%s (%s)", key, value, source if raw_value is not None else "default")


load_environment()
