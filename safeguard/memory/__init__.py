"""
Safeguard Memory Module
Holds baseline values and scaler params for normalization
"""

from .baseline_manager import BaselineManager

__all__ = ['BaselineManager']
