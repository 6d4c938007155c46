from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    address_hrp: str = "drt"
    address_length: int = 32  # public key bytes
    max_relay_depth: int = 16  # nested relayedTx / relayedTxV2 layers

    class Config:
        env_prefix = "TXDECODER_"
        env_file = ".env"


settings = Settings()
