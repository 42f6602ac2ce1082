"""
Утилиты otpvault
"""
