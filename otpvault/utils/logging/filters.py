"""
🔒 Sensitive Data Filter for Logging
"""

import logging
import re


class SensitiveDataFilter(logging.Filter):
    """Автоматически скрывает пароли, OTP-секреты, ключи и токены"""

    PATTERNS = [
        # Passwords
        (re.compile(r'password["\']?\s*[:=]\s*["\']?([^"\'\s,}]+)', re.IGNORECASE),
         'password=***HIDDEN***'),

        # OTP secrets ("secret": "JBSWY3DP...", secret=...)
        (re.compile(r'secret["\']?\s*[:=]\s*["\']?([^"\'\s,}]+)', re.IGNORECASE),
         'secret=***HIDDEN***'),

        # Keys
        (re.compile(r'\b(?:\w+[_-])?key["\']?\s*[:=]\s*["\']?([^"\'\s,}]+)', re.IGNORECASE),
         'key=***HIDDEN***'),

        # Tokens
        (re.compile(r'token["\']?\s*[:=]\s*["\']?([^"\'\s,}]{20,})', re.IGNORECASE),
         'token=***HIDDEN***'),
        (re.compile(r'Bearer\s+([A-Za-z0-9\-._~+/]+)'), 'Bearer ***HIDDEN***'),

        # otpauth:// URI
        (re.compile(r'otpauth://\S+', re.IGNORECASE), 'otpauth://***HIDDEN***'),
    ]

    def mask(self, text: str) -> str:
        for pattern, replacement in self.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, record):
        """Фильтрует чувствительные данные из лог-сообщений"""
        if record.args:
            # Подставляем аргументы сразу, иначе секрет попадёт в вывод через %s
            try:
                message = record.getMessage()
            except (TypeError, ValueError):
                return True
            record.msg = self.mask(message)
            record.args = None
        elif isinstance(record.msg, str):
            record.msg = self.mask(record.msg)
        return True
