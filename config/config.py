"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 计算器参数
CALCULATOR_CONFIG = {
    "error_policy": "strict",  # strict: 抛出 CalculatorError；lenient: 按默认值降级
    "angle_unit": "degree",  # 三角函数参数以角度计
    "missing_operand": 0.0,  # lenient 下缺失操作数的替代值
    "missing_divisor": 1.0,  # lenient 下除法缺失除数的替代值
    "empty_result": 0.0,  # lenient 下空栈的结果
}

ERROR_POLICIES = ("strict", "lenient")

# 日志参数
LOGGING_CONFIG = {
    "level": logging.WARNING,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


def resolve_policy(policy=None):
    """返回实际生效的错误策略，未指定时取配置默认值"""
    if policy is None:
        policy = CALCULATOR_CONFIG["error_policy"]
    if policy not in ERROR_POLICIES:
        raise ValueError(f"Unknown error policy: {policy!r} (expected one of {ERROR_POLICIES})")
    return policy


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["error_policy"] in ERROR_POLICIES, "未知的错误策略"
    assert CALCULATOR_CONFIG["angle_unit"] == "degree", "三角函数只支持角度制"
    assert CALCULATOR_CONFIG["missing_divisor"] != 0.0, "缺失除数不能替换为0"
    logger.info("Configuration validated successfully!")
