from pydantic_settings import BaseSettings

# Input reference meaning "read standard input"; never used as an output label.
STDIN_LABEL = "-"
DEFAULT_READ_CHUNK_SIZE = 16384


class Settings(BaseSettings):
    # Logging
    verbose: bool = False

    # Input
    read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE

    # Parser
    remove_blank_text: bool = True  # libxml2 XML_PARSE_NOBLANKS
    huge_tree: bool = False

    model_config = {"env_prefix": "XPATHCAT_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
