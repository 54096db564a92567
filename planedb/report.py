"""Human-readable and JSON-ready reports for looked-up planes"""

from typing import Any, Dict, List, Optional

from .plane_database import PlaneDatabase
from .records import RegistrationRecord, TypeRecord

NO_MODEL_INFO = "No model info"


def _field(label: str, value: Any) -> str:
    return f"    {label:<15}: {value}"


def format_type_report(type_record: TypeRecord) -> str:
    """Render the type section of a plane report"""
    lines = ["  ## Type"]
    if type_record.manufacturer:
        lines.append(_field("Manufacturer", type_record.manufacturer))
    if type_record.model:
        lines.append(_field("Model name", type_record.model))
    lines.append(_field("Type", f"{type_record.category} - {type_record.category_name}"))
    lines.append(_field("Seats", type_record.seat_count))
    return "\n".join(lines)


def format_registration_report(db: PlaneDatabase, record: RegistrationRecord) -> str:
    """Render a registration and its aircraft type

    Args:
        db: Database used to resolve the record's type_id
        record: Registration to describe

    Returns:
        Multi-line report; the type section is replaced by "No model info"
        when the type_id has no match in the catalog
    """
    lines: List[str] = ["  ## Registration"]
    lines.append(_field("N-Number", record.tail_number))
    if record.registrant_name:
        lines.append(_field("Registrant", record.registrant_name))
    if record.type_id:
        lines.append(_field("Model", record.type_id))

    type_record = db.lookup_type(record.type_id)
    if type_record is None:
        lines.append(NO_MODEL_INFO)
    else:
        lines.append(format_type_report(type_record))
    return "\n".join(lines)


def type_to_dict(type_record: TypeRecord) -> Dict[str, Any]:
    return {
        "id": type_record.id,
        "manufacturer": type_record.manufacturer,
        "model": type_record.model,
        "category": type_record.category,
        "category_name": type_record.category_name,
        "seat_count": type_record.seat_count,
    }


def registration_to_dict(db: PlaneDatabase, record: RegistrationRecord) -> Dict[str, Any]:
    """JSON-ready report; absent text fields and unresolved types are null"""
    type_record: Optional[TypeRecord] = db.lookup_type(record.type_id)
    return {
        "icao": record.icao_hex,
        "n_number": record.tail_number,
        "registrant": record.registrant_name,
        "type_id": record.type_id,
        "type_resolved": type_record is not None,
        "type": type_to_dict(type_record) if type_record else None,
    }
