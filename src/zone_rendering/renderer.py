from datetime import date

from ptr_zones import ZoneRecordSet, ptrRecords


def formatSerial(day: date, revision: int = 1) -> str:
    # YYYYMMDDnn
    if not 0 <= revision <= 99:
        raise ValueError(f"serial revision {revision} does not fit into two digits")
    return f"{day:%Y%m%d}{revision:02d}"


def renderPTRLines(recordSet: ZoneRecordSet) -> str:
    return "".join(f"{record}\n" for record in ptrRecords(recordSet))


def renderZone(recordSet: ZoneRecordSet, template: str, serial: str) -> str:
    return (
        template.replace("{{ PTR_RECORDS }}", renderPTRLines(recordSet))
        .replace("{{ ZONE }}", recordSet.zone_name)
        .replace("{{ SERIAL }}", serial)
    )
