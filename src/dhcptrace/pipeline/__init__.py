from .decode_loop import DecodeLoop

__all__ = ['DecodeLoop']
