from dataclasses import asdict, dataclass


def cell_text(value):
    """Render a spreadsheet cell value the way it was typed"""
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class StudentIdentity:
    """The four fields that identify a student and key every scan"""

    name: str
    email: str
    admission_id: str
    phone_number: str

    @classmethod
    def from_row(cls, row):
        return cls(
            name=cell_text(row.name),
            email=cell_text(row.email),
            admission_id=cell_text(row.admission_id),
            phone_number=cell_text(row.phone_number),
        )

    @classmethod
    def from_payload(cls, payload):
        return cls(**{field: payload.get(field, '') for field in ('name', 'email', 'admission_id', 'phone_number')})

    def as_filter(self):
        return asdict(self)

    def as_query_params(self):
        return {
            'name': self.name,
            'email': self.email,
            'admissionId': self.admission_id,
            'phoneNumber': self.phone_number,
        }
