"""配置模块"""
from .config import (
    CALCULATOR_CONFIG, ERROR_POLICIES, LOGGING_CONFIG,
    resolve_policy, validate_config
)

__all__ = [
    'CALCULATOR_CONFIG', 'ERROR_POLICIES', 'LOGGING_CONFIG',
    'resolve_policy', 'validate_config'
]
