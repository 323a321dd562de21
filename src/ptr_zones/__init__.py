from .address_expander import (
    ExpandedPrefix,
    canonicalAddress,
    isReserved,
    iterAddresses,
    parsePrefix,
    zoneForNetwork,
)
from .errors import MissingPTRMetadataError, SkippableInputError
from .models import AddressFamily, AddressOverride, Prefix, PTRRecord, ZoneRecordSet
from .name_synthesizer import synthesizePTRName
from .record_overlay import overlayOverrides
from .zone_aggregator import ZoneAccumulator, ptrRecords, reverseLabel, targetFQDN
