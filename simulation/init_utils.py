import re

import numpy as np
import config as c
from errors import InvalidArgumentError

PROMPT = "Enter initial prey and predator densities: "

_SEPARATOR = re.compile(r"[\s,]+")

def _tokens(text: str) -> list:
    return [tok for tok in _SEPARATOR.split(text.strip()) if tok]

def _to_float(tok: str) -> float:
    try:
        return float(tok)
    except ValueError:
        raise InvalidArgumentError(f"Not a number: {tok!r}") from None

def parse_initial_state(text: str) -> np.ndarray:
    """
    解析 "40 9" 或 "40, 9" 形式的初始密度。
    必须恰好两个数 [prey, predator]。
    """
    tokens = _tokens(text)
    if len(tokens) != len(c.STATE_COLUMNS):
        raise InvalidArgumentError(
            f"Expected {len(c.STATE_COLUMNS)} numbers (prey predator), got {len(tokens)}: {text!r}"
        )
    return np.array([_to_float(tok) for tok in tokens], dtype=c.STATE_DTYPE)

def prompt_initial_state(input_fn=None) -> np.ndarray:
    """
    在控制台读取两个数，可跨多行输入 (类似流式读取)。
    多于两个数时，多余的部分被忽略。
    """
    if input_fn is None:
        input_fn = input
    values = []
    prompt = PROMPT
    while len(values) < len(c.STATE_COLUMNS):
        try:
            line = input_fn(prompt)
        except EOFError:
            raise InvalidArgumentError("Input ended before prey and predator densities were read") from None
        prompt = ""
        for tok in _tokens(line):
            if len(values) == len(c.STATE_COLUMNS):
                break
            values.append(_to_float(tok))

    return np.array(values, dtype=c.STATE_DTYPE)
