"""Exception hierarchy for game errors."""

from __future__ import annotations


class GameException(Exception):
    """Base class of all game errors; carries a message and an optional context."""

    def __init__(self, message: str, context: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def full_message(self) -> str:
        """Return the message together with its context."""
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class ResourceNotFoundException(GameException):
    """A texture, sound or other resource could not be loaded."""

    def __init__(self, resource_name: str, path: str = "") -> None:
        super().__init__(f"Resource not found: {resource_name}", path)
        self.resource_name = resource_name
        self.path = path

    def full_message(self) -> str:
        if self.path:
            return f"{self.message} (path: {self.path})"
        return self.message


class InvalidLevelException(GameException):
    """A level could not be used."""

    def __init__(self, level_name: str, reason: str = "") -> None:
        message = f"Invalid level '{level_name}'"
        if reason:
            message += f": {reason}"
        super().__init__(message, "Level")
        self.level_name = level_name
        self.reason = reason

    def full_message(self) -> str:
        return f"Level error: {self.message}"


class CollisionDetectionException(GameException):
    """Collision detection failed."""

    def __init__(self, message: str, context: str = "CollisionDetector") -> None:
        super().__init__(message, context)

    def full_message(self) -> str:
        return f"Collision detection error in {self.context}: {self.message}"


class GameStateException(GameException):
    """An operation was not valid in the current game state."""

    def __init__(self, state_name: str, message: str, context: str = "GameStateManager") -> None:
        super().__init__(message, context)
        self.state_name = state_name

    def full_message(self) -> str:
        return f"Game state error in {self.context} (state: {self.state_name}): {self.message}"


class EffectProcessingException(GameException):
    """Applying collision effects failed."""

    def __init__(self, message: str, context: str = "EffectManager") -> None:
        super().__init__(message, context)

    def full_message(self) -> str:
        return f"Effect processing error in {self.context}: {self.message}"


class ManagerInitializationException(GameException):
    """A manager could not be initialised."""

    def __init__(self, manager_name: str, reason: str = "") -> None:
        message = f"Failed to initialize {manager_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, manager_name)
        self.manager_name = manager_name
        self.reason = reason

    def full_message(self) -> str:
        return f"Initialization error: {self.message}"


class LevelOperationException(GameException):
    """A level operation such as loading or restarting failed."""

    def __init__(self, operation: str, reason: str = "") -> None:
        message = f"Level operation '{operation}' failed"
        if reason:
            message += f": {reason}"
        super().__init__(message, "LevelManager")
        self.operation = operation
        self.reason = reason

    def full_message(self) -> str:
        return f"Level operation error: {self.message}"


class ObjectCreationException(GameException):
    """A game object could not be created."""

    def __init__(self, object_type: str, reason: str = "") -> None:
        message = f"Failed to create object of type '{object_type}'"
        if reason:
            message += f": {reason}"
        super().__init__(message, "ObjectFactory")
        self.object_type = object_type
        self.reason = reason

    def full_message(self) -> str:
        return f"Object creation error: {self.message}"