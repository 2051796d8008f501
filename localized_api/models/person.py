from typing import Optional

from pydantic import BaseModel, Field


class Person(BaseModel):
    name: Optional[str] = Field(default=None, description="The person name")
    city: Optional[str] = Field(default="Taggia", description="The city where the person lives")
