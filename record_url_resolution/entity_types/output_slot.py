from enum import Enum


class OutputSlot(str, Enum):
    QUOTE = "quote"
    ACCOUNT = "account"
    BUILDING_LOCATION = "building_location"
    WORK_ORDER = "work_order"
    MAINTENANCE_CONTRACT = "maintenance_contract"
    PROJECT = "project"
    DEVICE = "device"
    SERVICE_ACTIVITY = "service_activity"
    INVOICE = "invoice"
    EMAIL = "email"
