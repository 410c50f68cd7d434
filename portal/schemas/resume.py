from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

class ResumeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    file_name: str
    file_url: str
    text: str
    user_id: int
    uploaded_at: Optional[datetime] = None
