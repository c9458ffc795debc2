"""卢旺达各区坐标."""

# 基加利坐标，未知地区的默认值
KIGALI = (-1.9441, 30.0619)

DISTRICT_COORDINATES: dict[str, tuple[float, float]] = {
    "Bugesera": (-2.2167, 30.2000),
    "Burera": (-1.4833, 29.8667),
    "Gakenke": (-1.6833, 29.7833),
    "Gasabo": (-1.9536, 30.1044),
    "Gatsibo": (-1.5833, 30.4167),
    "Gicumbi": (-1.5500, 30.1167),
    "Gisagara": (-2.5333, 29.8333),
    "Huye": (-2.5967, 29.7394),
    "Kamonyi": (-2.0333, 29.8167),
    "Karongi": (-1.9667, 29.3833),
    "Kayonza": (-1.8833, 30.6167),
    "Kicukiro": (-1.9667, 30.1000),
    "Kirehe": (-2.2167, 30.7167),
    "Muhanga": (-2.0833, 29.7500),
    "Musanze": (-1.4997, 29.6350),
    "Ngoma": (-2.1833, 30.5333),
    "Ngororero": (-1.7833, 29.5333),
    "Nyabihu": (-1.6500, 29.5167),
    "Nyagatare": (-1.2833, 30.3167),
    "Nyamagabe": (-2.4500, 29.6167),
    "Nyamasheke": (-2.3167, 29.1167),
    "Nyanza": (-2.3500, 29.7500),
    "Nyarugenge": (-1.9536, 30.0606),
    "Nyaruguru": (-2.5833, 29.5000),
    "Rubavu": (-1.6833, 29.2667),
    "Ruhango": (-2.1833, 29.7833),
    "Rulindo": (-1.7667, 30.0667),
    "Rusizi": (-2.4833, 28.9167),
    "Rutsiro": (-1.8333, 29.3333),
    "Rwamagana": (-1.9500, 30.4333),
}
