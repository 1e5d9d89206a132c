"""
Factory for creating the short code strategy.
The configuration is validated here; errors are fatal at startup.
"""

import logging
from enum import Enum
from typing import Optional

from shorty.codec import Alphabet
from shorty.config import Settings, settings as default_settings
from shorty.exceptions import ConfigurationError
from shorty.services.short_code_strategies import (
    ShortCodeStrategy,
    PlainShortCodeStrategy,
    SaltedShortCodeStrategy
)

logger = logging.getLogger(__name__)


class ShortCodeStrategyType(Enum):
    """Available short code strategies"""
    PLAIN = "plain"
    SALTED = "salted"


class ShortCodeFactory:
    """Builds the strategy matching a settings object"""
    
    @staticmethod
    def strategy_type_for(salt: str, padding: int) -> ShortCodeStrategyType:
        """Salting is on only with a non-empty salt and positive padding"""
        if salt and padding > 0:
            return ShortCodeStrategyType.SALTED
        return ShortCodeStrategyType.PLAIN
    
    @classmethod
    def create_strategy(cls, config: Optional[Settings] = None) -> ShortCodeStrategy:
        """
        Create a short code strategy.
        
        Args:
            config: Settings to read alphabet/salt/padding from.
                    If None, uses the application settings.
        
        Returns:
            A new, immutable ShortCodeStrategy
        
        Raises:
            ConfigurationError: empty or duplicate alphabet, negative padding
        """
        config = config or default_settings
        
        if config.padding < 0:
            raise ConfigurationError(f"Padding must not be negative, got {config.padding}")
        
        alphabet = Alphabet(config.alphabet)
        strategy_type = cls.strategy_type_for(config.salt, config.padding)
        
        if strategy_type == ShortCodeStrategyType.SALTED:
            instance = SaltedShortCodeStrategy(alphabet, config.salt, config.padding)
        else:
            instance = PlainShortCodeStrategy(alphabet)
        
        logger.info("Short code strategy: %s (base %d)", strategy_type.value, alphabet.base)
        return instance
