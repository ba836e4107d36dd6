"""Factory for building validation rules from configuration."""

import logging
from typing import Any

from dataknobs_config import FactoryBase

from .registry import ValidatorRegistry, validator_registry
from .rule import Rule

logger = logging.getLogger(__name__)


class ValidatorFactory(FactoryBase):
    """Factory for creating validation rules from configuration.

    Configuration Options:
        validator (str): Registered validator name (``number``, ``type``,
            ``uuid``)
        options (any): Validator options, canonical or shorthand. Canonical
            options may also carry ``allow_nil`` and ``allow_blank``.

    Example Configuration:
        validators:
          - name: order_id
            factory: dataknobs_validators.factory.ValidatorFactory
            validator: uuid
            options:
              format: hex
              allow_nil: true
          - name: quantity
            factory: dataknobs_validators.factory.ValidatorFactory
            validator: number
            options:
              is: true
              greater_than: 0
    """

    def __init__(self, registry: ValidatorRegistry | None = None):
        self.registry = registry or validator_registry

    def create(self, **config: Any) -> Rule:
        """Create a Rule from configuration.

        Args:
            **config: Rule configuration

        Returns:
            Rule instance

        Raises:
            UnknownValidatorError: If the validator name is not registered
        """
        name = config.get("validator", "")
        validator = self.registry.lookup(name)

        logger.info(f"Creating {name} validation rule")
        return Rule(validator, config.get("options"))


# Create singleton instance for registration
validator_factory = ValidatorFactory()
