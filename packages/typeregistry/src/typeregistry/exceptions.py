# typeregistry/exceptions.py
"""Registry exceptions"""


class TypeRegistryError(Exception): ...


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class RegistryError(TypeRegistryError): ...


class DuplicateRegistrationError(RegistryError, ValueError): ...


class RegistryFrozenError(RuntimeError, RegistryError): ...


class RegistryConfigurationError(RegistryError): ...
