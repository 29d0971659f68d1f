import json
from dataclasses import dataclass
from typing import Any, Type, TypeVar

T = TypeVar("T")


@dataclass
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _instance_attributes(obj: Any) -> dict:
    try:
        return vars(obj)
    except TypeError:
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable") from None


def get_json(obj: Any) -> str:
    """
    Input: obj - dict, list, primitive or any object with instance attributes
    Functionality: Serialize to compact JSON, e.g. [1,2,3] -> '[1,2,3]'
    Output: str
    """
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False, default=_instance_attributes)


def from_json(cls: Type[T], json_text: str) -> T:
    """
    Input:
        - cls - type whose methods the result should expose
        - json_text (str) - a JSON object, e.g. '{"width":10,"height":20}'
    Functionality: Create an instance of cls without running __init__ and copy every key onto it
    Output: instance of cls
    """
    data = json.loads(json_text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

    obj = cls.__new__(cls)
    for key, value in data.items():
        setattr(obj, key, value)
    return obj
