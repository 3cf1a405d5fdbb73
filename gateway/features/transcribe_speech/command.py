from pydantic import BaseModel

RECORDING_FILENAME = "recording.wav"
RECORDING_CONTENT_TYPE = "audio/wav"


class Transcription(BaseModel):
    text: str
