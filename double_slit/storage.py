"""
Saved configurations.

Pydantic models define the record shape; ConfigurationStore keeps the records
in SQLite. Field names follow the JSON contract of the REST API
(wavelength in nm, separation in mm, distance in cm, createdAt).
"""
import logging
import sqlite3
import threading
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from double_slit.errors import ConfigurationNotFoundError, ConfigurationValidationError
from double_slit.optics import OpticalParameters

logger = logging.getLogger(__name__)


class ConfigurationCreate(BaseModel):
    """Input accepted by ``create``; id and timestamp are assigned by the store."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)

    name: str = Field(..., description="Experiment name shown in the load list.")
    wavelength: float = Field(..., gt=0, description="Wavelength in nanometers.")
    separation: float = Field(..., gt=0, description="Slit separation in millimeters.")
    distance: float = Field(..., gt=0, description="Slit-to-screen distance in centimeters.")

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value


class SavedConfiguration(ConfigurationCreate):
    id: int
    created_at: datetime

    def to_parameters(self) -> OpticalParameters:
        return OpticalParameters(
            wavelength_nm=self.wavelength,
            separation_mm=self.separation,
            distance_cm=self.distance,
        )


def _validation_error(exc: ValidationError) -> ConfigurationValidationError:
    first = exc.errors()[0]
    message = first["msg"]
    # pydantic prefixes messages raised from validators
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    field = ".".join(str(part) for part in first["loc"])
    return ConfigurationValidationError(message, field)


SQLITE_MIN_INTEGER = -2 ** 63
SQLITE_MAX_INTEGER = 2 ** 63 - 1

_SCHEMA = """
CREATE TABLE IF NOT EXISTS configurations (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    wavelength REAL NOT NULL,
    separation REAL NOT NULL,
    distance REAL NOT NULL,
    created_at TEXT NOT NULL
)
"""


class ConfigurationStore:
    """
    SQLite-backed list / create / delete of saved configurations.

    A single connection is shared across threads (Streamlit and Flask both
    serve requests from worker threads) and guarded by a lock. ``":memory:"``
    gives a throwaway database.
    """

    def __init__(self, path: str = ":memory:"):
        self.path = path
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        with self._lock, self._conn:
            self._conn.execute(_SCHEMA)
        logger.info(f"Configuration store opened at {path}")

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def list(self) -> List[SavedConfiguration]:
        """All saved configurations, oldest first."""
        with self._lock:
            rows = self._conn.execute(
                "SELECT id, name, wavelength, separation, distance, created_at "
                "FROM configurations ORDER BY created_at, id"
            ).fetchall()
        return [SavedConfiguration.model_validate(dict(row)) for row in rows]

    @staticmethod
    def _check_id(config_id: int) -> None:
        # ids outside SQLite's signed 64-bit INTEGER cannot exist
        if not SQLITE_MIN_INTEGER <= config_id <= SQLITE_MAX_INTEGER:
            raise ConfigurationNotFoundError(config_id)

    def get(self, config_id: int) -> SavedConfiguration:
        self._check_id(config_id)
        with self._lock:
            row = self._conn.execute(
                "SELECT id, name, wavelength, separation, distance, created_at "
                "FROM configurations WHERE id = ?", (config_id,)
            ).fetchone()
        if row is None:
            raise ConfigurationNotFoundError(config_id)
        return SavedConfiguration.model_validate(dict(row))

    def create(self, name: str, wavelength: float, separation: float, distance: float) -> SavedConfiguration:
        """
        Validate and insert a configuration.

        Raises:
            ConfigurationValidationError: empty name or non-positive values.
        """
        try:
            data = ConfigurationCreate(name=name, wavelength=wavelength, separation=separation, distance=distance)
        except ValidationError as e:
            err = _validation_error(e)
            logger.warning(f"Rejected configuration ({err.field}): {err.message}")
            raise err from e
        return self.insert(data)

    def insert(self, data: ConfigurationCreate) -> SavedConfiguration:
        created_at = datetime.now(timezone.utc)
        with self._lock, self._conn:
            cursor = self._conn.execute(
                "INSERT INTO configurations (name, wavelength, separation, distance, created_at) "
                "VALUES (?, ?, ?, ?, ?)",
                (data.name, data.wavelength, data.separation, data.distance, created_at.isoformat()),
            )
            config_id = cursor.lastrowid
        logger.info(f"Saved configuration {config_id} '{data.name}'")
        return SavedConfiguration(id=config_id, created_at=created_at, **data.model_dump())

    def delete(self, config_id: int) -> None:
        """
        Remove a configuration.

        Raises:
            ConfigurationNotFoundError: no record with that id.
        """
        self._check_id(config_id)
        with self._lock, self._conn:
            cursor = self._conn.execute("DELETE FROM configurations WHERE id = ?", (config_id,))
        if cursor.rowcount == 0:
            raise ConfigurationNotFoundError(config_id)
        logger.info(f"Deleted configuration {config_id}")

    @staticmethod
    def parse_create(payload) -> ConfigurationCreate:
        """Validate an API payload (camelCase or snake_case keys)."""
        try:
            return ConfigurationCreate.model_validate(payload)
        except ValidationError as e:
            raise _validation_error(e) from e
