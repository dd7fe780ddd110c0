# findjob/models/enums.py
# 對應資料庫中的 ENUM 型別
import enum
from sqlalchemy import Enum

class Province(str, enum.Enum):
    damascus = "damascus"
    aleppo = "aleppo"
    homs = "homs"
    hama = "hama"
    latakia = "latakia"
    tartus = "tartus"
    deir_ez_zor = "deir_ez_zor"
    raqqa = "raqqa"
    hasakah = "hasakah"
    daraa = "daraa"
    suwayda = "suwayda"
    quneitra = "quneitra"
    idlib = "idlib"
    rif_dimashq = "rif_dimashq"

class UserType(str, enum.Enum):
    individual = "individual"
    employer = "employer"
    admin = "admin"

class OpportunityType(str, enum.Enum):
    job = "job"
    training = "training"
    volunteer = "volunteer"

class OpportunityStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    expired = "expired"

class ApplicationStatus(str, enum.Enum):
    pending = "pending"
    reviewed = "reviewed"
    shortlisted = "shortlisted"
    rejected = "rejected"
    accepted = "accepted"


def db_enum(enum_cls, name: str) -> Enum:
    """以 Python Enum 的 value 存入資料庫"""
    return Enum(enum_cls, name=name, values_callable=lambda obj: [e.value for e in obj])
