import json
from enum import Enum

LAST_APPLIED_CONFIG_ANNOTATION = "kubectl.kubernetes.io/last-applied-configuration"
DEFAULT_FIELD_MANAGER = "kubectl-create"


class DryRunStrategy(Enum):
    NONE = "none"
    CLIENT = "client"
    SERVER = "server"


class ValidationDirective(Enum):
    STRICT = "Strict"
    WARN = "Warn"
    IGNORE = "Ignore"


def get_dry_run_strategy(value):
    """--dry-run 的取值：none / client / server，未指定视为 none"""
    if not value:
        return DryRunStrategy.NONE
    try:
        return DryRunStrategy(value.lower())
    except ValueError:
        raise ValueError(
            f"invalid dry-run value ({value}). Must be \"none\", \"server\", or \"client\"."
        )


def get_validation_directive(value):
    """--validate 的取值：strict / warn / ignore，兼容 true / false"""
    if value is None or value == "":
        return ValidationDirective.STRICT
    lowered = value.lower()
    if lowered in ("true", "strict"):
        return ValidationDirective.STRICT
    if lowered == "warn":
        return ValidationDirective.WARN
    if lowered in ("false", "ignore"):
        return ValidationDirective.IGNORE
    raise ValueError(
        f"invalid - validate option {value!r}; must be one of: strict (or true), warn, ignore (or false)"
    )


def create_or_update_annotation(create_annotation, pvc):
    """--save-config 时把对象当前配置写入 last-applied 注解，返回新对象"""
    if not create_annotation:
        return pvc
    return pvc.with_annotation(
        LAST_APPLIED_CONFIG_ANNOTATION,
        json.dumps(pvc.to_dict(), separators=(",", ":")),
    )


def name_from_command_args(args):
    names = args or []
    if len(names) != 1:
        raise ValueError(f"exactly one NAME is required, got {len(names)}")
    return names[0]
