from .server import ACCEPTED, CallbackReceiverServer

__all__ = ["ACCEPTED", "CallbackReceiverServer"]
