"""Shared constants and enums used across the application."""

from enum import StrEnum

APP_NAME = "Sistem Inventory Gudang"
APP_DESCRIPTION = "Sistem Inventory Gudang Sparepart Alat Berat"


class Role(StrEnum):
    """Application roles for authenticated dashboard users."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"


class EquipmentStatus(StrEnum):
    """Operational status of a heavy-equipment unit (alat berat)."""

    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    INACTIVE = "inactive"

    @property
    def label(self) -> str:
        return EQUIPMENT_STATUS_LABELS[self]


EQUIPMENT_STATUS_LABELS = {
    EquipmentStatus.ACTIVE: "Aktif",
    EquipmentStatus.MAINTENANCE: "Maintenance",
    EquipmentStatus.INACTIVE: "Non-aktif",
}


class ApprovalStatus(StrEnum):
    """Approval state of a stock-out request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @property
    def label(self) -> str:
        return {
            ApprovalStatus.PENDING: "Menunggu",
            ApprovalStatus.APPROVED: "Disetujui",
            ApprovalStatus.REJECTED: "Ditolak",
        }[self]


class AttendanceStatus(StrEnum):
    """Daily attendance status of an employee."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    LEAVE = "leave"
    SICK = "sick"

    @property
    def label(self) -> str:
        return {
            AttendanceStatus.PRESENT: "Hadir",
            AttendanceStatus.ABSENT: "Tidak Hadir",
            AttendanceStatus.LATE: "Terlambat",
            AttendanceStatus.LEAVE: "Izin",
            AttendanceStatus.SICK: "Sakit",
        }[self]


class PettyCashType(StrEnum):
    """Direction of a petty-cash (kas kecil) entry."""

    INCOME = "PEMASUKAN"
    EXPENSE = "PENGELUARAN"


class ImportType(StrEnum):
    """Spreadsheet import templates."""

    KATEGORI = "kategori"
    SUPPLIER = "supplier"
    ALAT_BERAT = "alat-berat"
    SPAREPART = "sparepart"
    KARYAWAN = "karyawan"
    STOK_AWAL = "stok-awal"


EQUIPMENT_TYPES = (
    "Excavator",
    "Bulldozer",
    "Wheel Loader",
    "Motor Grader",
    "Dump Truck",
    "Crane",
    "Forklift",
    "Backhoe Loader",
    "Compactor",
    "Grader",
    "Scraper",
    "Paver",
)

POSITION_OPTIONS = (
    "Mekanik",
    "Staff Gudang",
    "Operator",
    "Helper",
    "Supervisor",
    "Admin",
    "Driver",
    "Security",
)

UNIT_OPTIONS = ("pcs", "liter", "set", "meter", "kg", "box", "roll", "lembar")
