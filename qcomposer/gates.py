# qcomposer/gates.py
from enum import Enum
import numpy as np

from .errors import InvalidGateError


class GateKind(Enum):
    H = ("H", 1)
    X = ("X", 1)
    CX = ("●⊕", 2)         # targets: (control, target)
    MEASURE = ("M", 1)     # annotation only, never touches the state

    def __init__(self, label: str, arity: int):
        self.label = label
        self.arity = arity

    @classmethod
    def parse(cls, text: str) -> "GateKind":
        key = text.strip().upper()
        key = {"CNOT": "CX", "M": "MEASURE"}.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise InvalidGateError(f"Unknown gate {text!r}") from None


def H(dtype=np.complex128) -> np.ndarray:
    s = np.sqrt(0.5)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def CNOT(dtype=np.complex128) -> np.ndarray:
    # 4x4 in order 00,01,10,11 with the control as the high bit
    mat = np.eye(4, dtype=dtype)
    # swap |10> <-> |11>
    mat[2,2] = 0; mat[3,3] = 0
    mat[2,3] = 1; mat[3,2] = 1
    return mat
