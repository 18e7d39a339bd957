from .signup import SignUpController

__all__ = ["SignUpController"]
