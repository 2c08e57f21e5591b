#!/usr/bin/env python3
"""
Internal consistency failures.
These signal a bug in declarg or its caller, not bad user input,
so the parser never catches them.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import DeclargError

class ContractViolation(DeclargError):
    general_msg = "Declarg Internal Contract Violation:"
    pass

class CoercionContractError(ContractViolation):
    """ A parsed value's kind does not fit the slot it is being placed in """
    general_msg = "Coercion Mismatch:"
    pass

class DisposedValueError(ContractViolation):
    """ An ArgValue's payload was read after it had been disposed """
    general_msg = "Use After Dispose:"
    pass
