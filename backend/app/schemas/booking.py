from datetime import date

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field

BOOKING_STATUSES = ("pending", "confirmed", "cancelled")


class BookingCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tour_id: int | None = Field(None, validation_alias=AliasChoices("tour_id", "tourId"))
    first_name: str = Field(min_length=1, validation_alias=AliasChoices("firstName", "first_name"))
    last_name: str = Field(min_length=1, validation_alias=AliasChoices("lastName", "last_name"))
    email: EmailStr
    phone: str = Field(min_length=1)
    country: str = ""
    adults: int = Field(ge=1)
    children: int = Field(0, ge=0)
    start_date: date = Field(validation_alias=AliasChoices("startDate", "start_date"))
    tour_type: str = Field("", validation_alias=AliasChoices("tour_type", "tourType"))
    special_requests: str = Field(
        "", validation_alias=AliasChoices("special_requests", "specialRequests")
    )
    total_price: float = Field(0, ge=0, validation_alias=AliasChoices("total_price", "totalPrice"))
    currency: str = Field("USD", min_length=3, max_length=3)


class BookingUpdate(BaseModel):
    tour_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    country: str | None = None
    start_date: date | None = None
    tour_date: date | None = None
    tour_type: str | None = None
    adults: int | None = Field(None, ge=1)
    children: int | None = Field(None, ge=0)
    total_price: float | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)
    special_requests: str | None = None
    status: str | None = None
    payment_status: str | None = None


class BookingStatusUpdate(BaseModel):
    status: str
