"""The "1byte" per-byte energy model used by CO2.js.

Energy figures are kWh per byte for data centres and an average of fixed
wired, wifi and 4G networks. Carbon intensities are grams of CO2 per kWh.
"""

from dataclasses import dataclass

from co2_action.services.emissions import EmissionsModel

CO2_PER_KWH_IN_DC_GREY = 519
CO2_PER_KWH_NETWORK_GREY = 475
CO2_PER_KWH_IN_DC_GREEN = 0

KWH_PER_BYTE_IN_DC = 7.2e-11
FIXED_NETWORK_WIRED = 4.29e-10
FIXED_NETWORK_WIFI = 1.52e-10
FOUR_G_MOBILE = 8.84e-10

KWH_PER_BYTE_FOR_NETWORK = (FIXED_NETWORK_WIRED + FIXED_NETWORK_WIFI + FOUR_G_MOBILE) / 3


@dataclass(frozen=True)
class OneByteModel(EmissionsModel):
    """Per-byte CO2 estimates from the 1byte model."""

    def per_byte(self, bytes_count: int, green: bool) -> float:
        """Return grams of CO2 for ``bytes_count`` bytes."""
        if bytes_count < 1:
            return 0.0
        if green:
            dc = bytes_count * KWH_PER_BYTE_IN_DC * CO2_PER_KWH_IN_DC_GREEN
            network = bytes_count * KWH_PER_BYTE_FOR_NETWORK * CO2_PER_KWH_NETWORK_GREY
            return dc + network
        kwh_per_byte = KWH_PER_BYTE_IN_DC + KWH_PER_BYTE_FOR_NETWORK
        return bytes_count * kwh_per_byte * CO2_PER_KWH_IN_DC_GREY
