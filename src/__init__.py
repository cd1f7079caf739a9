"""
flat — generic 2D geometry value types.

This package contains the Point and Vector models
and their element-type rules.
"""
