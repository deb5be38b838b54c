"""Process-wide registry of custom error resolvers.

A custom error resolver maps the numeric code of a ``Custom`` instruction
error to the error type of the program that raised it. Resolvers are keyed
by program id; registering twice for the same program replaces the first
resolver.
"""

import logging
import threading
from typing import Dict, List, Optional

from solders.pubkey import Pubkey

from solana_txparse.constants import SYSTEM_PROGRAM_ID, TOKEN_2022_PROGRAM_ID, TOKEN_PROGRAM_ID
from solana_txparse.errors.instruction_error import CustomErrorResolver
from solana_txparse.utils.locks import ReadWriteLock

logger = logging.getLogger(__name__)


class CustomErrorResolverRegistry:
    """Program id -> custom error resolver, safe for concurrent use.

    Lookups take a shared lock and registrations an exclusive one, so a
    reader sees either the previous or the new resolver of a program.
    Use ``get_instance()`` for the process-wide registry; separate instances
    can be created and passed explicitly to the error parsers.
    """

    _instance: Optional["CustomErrorResolverRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._resolvers: Dict[Pubkey, CustomErrorResolver] = {}
        self._lock = ReadWriteLock()

    @classmethod
    def get_instance(cls) -> "CustomErrorResolverRegistry":
        """
        Get the process-wide registry.

        Returns:
            CustomErrorResolverRegistry instance
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the process-wide registry; the next ``get_instance()`` starts empty."""
        with cls._instance_lock:
            cls._instance = None

    def register(self, program_id: Pubkey, resolver: CustomErrorResolver) -> None:
        """
        Register the custom error resolver of a program.

        Args:
            program_id: Program whose custom codes ``resolver`` understands
            resolver: Callable ``code -> Optional[Exception]``
        """
        with self._lock.write_locked():
            previous = self._resolvers.get(program_id)
            self._resolvers[program_id] = resolver
        if previous is not None and previous is not resolver:
            logger.warning(f"Custom error resolver for program {program_id} already registered. Overwriting.")

    def resolver_for(self, program_id: Pubkey) -> Optional[CustomErrorResolver]:
        with self._lock.read_locked():
            return self._resolvers.get(program_id)

    def resolve(self, program_id: Pubkey, code: int) -> Optional[Exception]:
        """
        Resolve a custom error code of a program.

        Args:
            program_id: Program that returned the error
            code: Custom error code

        Returns:
            The program's error, or None if the program has no resolver or
            the resolver does not know the code
        """
        resolver = self.resolver_for(program_id)
        if resolver is None:
            return None
        return resolver(code)

    def bound_resolver(self, program_id: Pubkey) -> CustomErrorResolver:
        """Resolver for the codes of one program, looked up at call time."""
        def resolve(code: int) -> Optional[Exception]:
            return self.resolve(program_id, code)
        return resolve

    def registered_programs(self) -> List[Pubkey]:
        with self._lock.read_locked():
            return list(self._resolvers)

    def __contains__(self, program_id: Pubkey) -> bool:
        with self._lock.read_locked():
            return program_id in self._resolvers


def _registry_or_default(registry: Optional[CustomErrorResolverRegistry]) -> CustomErrorResolverRegistry:
    return registry if registry is not None else CustomErrorResolverRegistry.get_instance()


def register_custom_error_resolver(
    program_id: Pubkey,
    resolver: CustomErrorResolver,
    registry: Optional[CustomErrorResolverRegistry] = None
) -> None:
    """Register a resolver on ``registry`` (the process-wide one by default)."""
    _registry_or_default(registry).register(program_id, resolver)


def resolve_custom_error(
    program_id: Pubkey,
    code: int,
    registry: Optional[CustomErrorResolverRegistry] = None
) -> Optional[Exception]:
    """Resolve a custom error code through ``registry`` (the process-wide one by default)."""
    return _registry_or_default(registry).resolve(program_id, code)


def register_builtin_error_resolvers(
    registry: Optional[CustomErrorResolverRegistry] = None
) -> CustomErrorResolverRegistry:
    """Register the resolvers of the built-in programs.

    The Token resolver is registered for Token-2022 as well, whose codes
    0 to 19 have the same meaning.
    """
    from solana_txparse.programs.system.errors import system_error_resolver
    from solana_txparse.programs.token.errors import token_error_resolver

    registry = _registry_or_default(registry)
    registry.register(SYSTEM_PROGRAM_ID, system_error_resolver)
    registry.register(TOKEN_PROGRAM_ID, token_error_resolver)
    registry.register(TOKEN_2022_PROGRAM_ID, token_error_resolver)
    return registry
