#!/usr/bin/env python3
"""
Errors in how a caller declared or addresses its arguments.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import UserError

class RegistryError(UserError):
    """ An argument definition, or the set of them, is malformed """
    general_msg = "Declarg Registry Failure:"
    pass

class InvalidFieldName(RegistryError):
    """ A field was addressed by a name the registry does not contain """
    general_msg = "Invalid Field Name:"
    pass
