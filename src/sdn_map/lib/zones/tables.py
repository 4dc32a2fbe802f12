"""Static zone tables: province membership, Thai zone names, and zone colors."""

from types import MappingProxyType

from sdn_map.lib.zones.types import HealthZone

_Z = HealthZone

PROVINCE_ZONES: MappingProxyType[str, HealthZone] = MappingProxyType(
    {
        # กรุงเทพฯ
        "กรุงเทพมหานคร": _Z.BANGKOK,
        # เหนือบน
        "เชียงใหม่": _Z.NORTH_UPPER,
        "เชียงราย": _Z.NORTH_UPPER,
        "ลำปาง": _Z.NORTH_UPPER,
        "ลำพูน": _Z.NORTH_UPPER,
        "แม่ฮ่องสอน": _Z.NORTH_UPPER,
        "น่าน": _Z.NORTH_UPPER,
        "พะเยา": _Z.NORTH_UPPER,
        "แพร่": _Z.NORTH_UPPER,
        # เหนือล่าง
        "นครสวรรค์": _Z.NORTH_LOWER,
        "อุทัยธานี": _Z.NORTH_LOWER,
        "กำแพงเพชร": _Z.NORTH_LOWER,
        "ตาก": _Z.NORTH_LOWER,
        "สุโขทัย": _Z.NORTH_LOWER,
        "พิษณุโลก": _Z.NORTH_LOWER,
        "พิจิตร": _Z.NORTH_LOWER,
        "เพชรบูรณ์": _Z.NORTH_LOWER,
        "อุตรดิตถ์": _Z.NORTH_LOWER,
        # อีสานบน
        "ขอนแก่น": _Z.NORTHEAST_UPPER,
        "อุดรธานี": _Z.NORTHEAST_UPPER,
        "เลย": _Z.NORTHEAST_UPPER,
        "หนองคาย": _Z.NORTHEAST_UPPER,
        "หนองบัวลำภู": _Z.NORTHEAST_UPPER,
        "บึงกาฬ": _Z.NORTHEAST_UPPER,
        "นครพนม": _Z.NORTHEAST_UPPER,
        "มุกดาหาร": _Z.NORTHEAST_UPPER,
        "สกลนคร": _Z.NORTHEAST_UPPER,
        "กาฬสินธุ์": _Z.NORTHEAST_UPPER,
        "ร้อยเอ็ด": _Z.NORTHEAST_UPPER,
        "มหาสารคาม": _Z.NORTHEAST_UPPER,
        # อีสานล่าง
        "นครราชสีมา": _Z.NORTHEAST_LOWER,
        "ชัยภูมิ": _Z.NORTHEAST_LOWER,
        "บุรีรัมย์": _Z.NORTHEAST_LOWER,
        "สุรินทร์": _Z.NORTHEAST_LOWER,
        "ศรีสะเกษ": _Z.NORTHEAST_LOWER,
        "อุบลราชธานี": _Z.NORTHEAST_LOWER,
        "ยโสธร": _Z.NORTHEAST_LOWER,
        "อำนาจเจริญ": _Z.NORTHEAST_LOWER,
        # กลาง
        "ลพบุรี": _Z.CENTRAL,
        "สิงห์บุรี": _Z.CENTRAL,
        "ชัยนาท": _Z.CENTRAL,
        "อ่างทอง": _Z.CENTRAL,
        "พระนครศรีอยุธยา": _Z.CENTRAL,
        "สระบุรี": _Z.CENTRAL,
        "ปทุมธานี": _Z.CENTRAL,
        "นนทบุรี": _Z.CENTRAL,
        # ตะวันออก
        "สมุทรปราการ": _Z.EAST,
        "ฉะเชิงเทรา": _Z.EAST,
        "นครนายก": _Z.EAST,
        "ปราจีนบุรี": _Z.EAST,
        "สระแก้ว": _Z.EAST,
        "จันทบุรี": _Z.EAST,
        "ตราด": _Z.EAST,
        "ระยอง": _Z.EAST,
        "ชลบุรี": _Z.EAST,
        # ตะวันตก
        "สมุทรสงคราม": _Z.WEST,
        "สมุทรสาคร": _Z.WEST,
        "นครปฐม": _Z.WEST,
        "กาญจนบุรี": _Z.WEST,
        "ราชบุรี": _Z.WEST,
        "สุพรรณบุรี": _Z.WEST,
        "เพชรบุรี": _Z.WEST,
        "ประจวบคีรีขันธ์": _Z.WEST,
        # ใต้บน
        "ชุมพร": _Z.SOUTH_UPPER,
        "ระนอง": _Z.SOUTH_UPPER,
        "สุราษฎร์ธานี": _Z.SOUTH_UPPER,
        "พังงา": _Z.SOUTH_UPPER,
        "ภูเก็ต": _Z.SOUTH_UPPER,
        "กระบี่": _Z.SOUTH_UPPER,
        "นครศรีธรรมราช": _Z.SOUTH_UPPER,
        # ใต้ล่าง
        "ตรัง": _Z.SOUTH_LOWER,
        "พัทลุง": _Z.SOUTH_LOWER,
        "สตูล": _Z.SOUTH_LOWER,
        "สงขลา": _Z.SOUTH_LOWER,
        "ปัตตานี": _Z.SOUTH_LOWER,
        "ยะลา": _Z.SOUTH_LOWER,
        "นราธิวาส": _Z.SOUTH_LOWER,
    }
)

ZONE_NAMES: MappingProxyType[HealthZone, str] = MappingProxyType(
    {
        _Z.NORTH_UPPER: "เหนือบน",
        _Z.NORTH_LOWER: "เหนือล่าง",
        _Z.NORTHEAST_UPPER: "อีสานบน",
        _Z.NORTHEAST_LOWER: "อีสานล่าง",
        _Z.CENTRAL: "กลาง",
        _Z.EAST: "ตะวันออก",
        _Z.WEST: "ตะวันตก",
        _Z.SOUTH_UPPER: "ใต้บน",
        _Z.SOUTH_LOWER: "ใต้ล่าง",
        _Z.BANGKOK: "กรุงเทพฯ",
    }
)

ZONE_COLORS: MappingProxyType[HealthZone, str] = MappingProxyType(
    {
        _Z.NORTH_UPPER: "#4CAF50",
        _Z.NORTH_LOWER: "#8BC34A",
        _Z.NORTHEAST_UPPER: "#FF9800",
        _Z.NORTHEAST_LOWER: "#FFC107",
        _Z.CENTRAL: "#9C27B0",
        _Z.EAST: "#00BCD4",
        _Z.WEST: "#795548",
        _Z.SOUTH_UPPER: "#2196F3",
        _Z.SOUTH_LOWER: "#3F51B5",
        _Z.BANGKOK: "#E91E63",
    }
)
