# flowspec/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Union

# Callback Types
Guard = Callable[[Any], bool]
Condition = Union[Guard, str]
Action = Callable[..., Any]
Hook = Callable[[Any, Any], None]
ErrorHook = Callable[[Any, BaseException, Any], None]
Declaration = Callable[[Any], None]
