"""各区医疗机构（演示数据）."""

from irembocare.models.hospital import Hospital

HOSPITALS_BY_DISTRICT: dict[str, list[Hospital]] = {
    "Bugesera": [
        Hospital(
            name="Nyamata District Hospital",
            type="Public",
            phone="+250788123456",
            email="nyamata.hospital@moh.gov.rw",
            telemedicine=True,
            specialties=["General Medicine", "Emergency Care", "Maternity"],
        ),
        Hospital(
            name="Ruhuha Health Center",
            type="Public",
            phone="+250788123457",
            email="ruhuha.hc@moh.gov.rw",
            telemedicine=True,
            specialties=["Primary Care", "Vaccination"],
        ),
        Hospital(
            name="Bugesera Medical Clinic",
            type="Private",
            phone="+250788123458",
            email="info@bugeseramedical.rw",
            telemedicine=True,
            specialties=["General Practice", "Pediatrics"],
        ),
        Hospital(
            name="Nyamata Polyclinic",
            type="Private",
            phone="+250788123459",
            email="contact@nyamatapolyclinic.rw",
            telemedicine=False,
            specialties=["Dental Care", "Eye Care"],
        ),
        Hospital(
            name="Bugesera Private Hospital",
            type="Private",
            phone="+250788123460",
            email="admin@bugeseraprivate.rw",
            telemedicine=True,
            specialties=["Surgery", "Internal Medicine", "Cardiology"],
        ),
    ],
    "Muhanga": [
        Hospital(
            name="Kabgayi District Hospital",
            type="Public",
            phone="+250788123461",
            email="kabgayi.hospital@moh.gov.rw",
            telemedicine=True,
            specialties=["General Medicine", "Surgery", "Maternity", "Emergency Care"],
        ),
        Hospital(
            name="Shyogwe Health Center",
            type="Public",
            phone="+250788123462",
            email="shyogwe.hc@moh.gov.rw",
            telemedicine=True,
            specialties=["Primary Care", "Maternal Health"],
        ),
        Hospital(
            name="Muhanga Medical Clinic",
            type="Private",
            phone="+250788123463",
            email="info@muhangamedical.rw",
            telemedicine=True,
            specialties=["General Practice", "Laboratory Services"],
        ),
        Hospital(
            name="Kabgayi Private Hospital",
            type="Private",
            phone="+250788123464",
            email="admin@kabgayiprivate.rw",
            telemedicine=True,
            specialties=["Specialized Surgery", "Oncology", "Radiology"],
        ),
        Hospital(
            name="Muhanga Polyclinic",
            type="Private",
            phone="+250788123465",
            email="contact@muhangapolyclinic.rw",
            telemedicine=False,
            specialties=["Dental Care", "Physiotherapy"],
        ),
    ],
    "Burera": [
        Hospital(
            name="Butaro District Hospital",
            type="Public",
            phone="+250788123466",
            email="butaro.hospital@moh.gov.rw",
            telemedicine=True,
            specialties=["General Medicine", "Emergency Care", "Mental Health"],
        ),
        Hospital(
            name="Rugarama Health Center",
            type="Public",
            phone="+250788123467",
            email="rugarama.hc@moh.gov.rw",
            telemedicine=True,
            specialties=["Primary Care", "Child Health"],
        ),
        Hospital(
            name="Burera Medical Center",
            type="Private",
            phone="+250788123468",
            email="info@bureramedical.rw",
            telemedicine=True,
            specialties=["General Practice", "Dermatology"],
        ),
        Hospital(
            name="Butaro Private Clinic",
            type="Private",
            phone="+250788123469",
            email="contact@butaroclinic.rw",
            telemedicine=False,
            specialties=["Outpatient Care", "Minor Surgery"],
        ),
        Hospital(
            name="Burera Polyclinic",
            type="Private",
            phone="+250788123470",
            email="admin@burerapolyclinic.rw",
            telemedicine=True,
            specialties=["Family Medicine", "Women's Health"],
        ),
    ],
}
