from pydantic import BaseModel

class Rectangle(BaseModel):
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

class GeoEntity(BaseModel):
    country: str
    city: str
