"""
Сервисы otpvault: andOTP импорт/экспорт, миграция, хранилище файлов
"""
