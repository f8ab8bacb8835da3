from .apis import FOREX

__all__ = ["FOREX"]
