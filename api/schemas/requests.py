from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
	model_config = ConfigDict(
		json_schema_extra={'example': {'username': 'alice', 'password': 'correct-horse'}}
	)

	username: str
	password: str = Field(..., min_length=6, max_length=100)
