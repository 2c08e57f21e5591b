#!/usr/bin/env python3
"""
These are the declarg specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import DeclargError, BackendError, FrontendError, UserError
from .parse import ParseError, InvalidValue, UnclosedDelimiter, MissingArgs
from .registry import RegistryError, InvalidFieldName
from .contract import ContractViolation, CoercionContractError, DisposedValueError

# ##-- end 1st party imports
