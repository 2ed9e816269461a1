"""Enumerations for the corporate tax calculator."""

from enum import StrEnum


class FilingMethod(StrEnum):
    BOOK = "book"  # 書審
    STANDARD = "standard"  # 所得額標準
    AUDIT = "audit"  # 查帳


class Industry(StrEnum):
    MANUFACTURING = "製造業"
    WHOLESALE = "批發業"
    RETAIL = "零售業"
    FOOD_SERVICE = "餐飲業"
    CONSTRUCTION = "營造業"
    TRANSPORTATION = "運輸業"
    INFORMATION_SERVICES = "資訊服務業"
    CONSULTING = "顧問服務業"
    REAL_ESTATE = "不動產業"


class ErrorKind(StrEnum):
    INITIALIZATION = "INITIALIZATION"
    INVALID_INPUT = "INVALID_INPUT"
    UNSPECIFIED_FILING_METHOD = "UNSPECIFIED_FILING_METHOD"
