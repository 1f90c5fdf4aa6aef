"""
dhcptrace - passive DHCPv4 decoder and transaction tracer.
"""

__version__ = "0.1.0"
