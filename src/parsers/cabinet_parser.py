"""Cabinet parser for medicine inventory spreadsheets."""

import logging
import warnings
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ..expiration import InvalidDateFormat, ShelfLifeRule, parse_calendar_date
from ..models import Medicine

logger = logging.getLogger(__name__)


class CabinetParser:
    """Parser for medicine cabinet inventory files.

    Expected file format (.xlsx or .csv, first sheet for Excel):
    - Columns:
        - Name: Medicine name (required)
        - Expiry Date: Box expiry date, YYYY-MM-DD or an Excel date cell (required)
        - Dosage: Dosage / quantity description (optional)
        - Opening Date: Date first opened (optional)
        - Rule: BOX_DATE, TWO_WEEKS, THREE_MONTHS or SIX_MONTHS (optional, default BOX_DATE)
        - ID: Medicine identifier (optional, generated when blank)

    The parser:
    1. Reads the sheet with every cell as text (Excel date cells stay dates)
    2. Skips rows without a name
    3. Skips rows whose expiry date or rule is invalid
    4. Skips rows repeating an ID already seen
    5. Reports all skipped rows in one warning per category
    """

    REQUIRED_COLUMNS = {"Name", "Expiry Date"}
    SUPPORTED_EXTENSIONS = {".xlsx", ".csv"}

    def __init__(self, file_path: Path | str):
        """Initialize cabinet parser.

        Args:
            file_path: Path to the inventory file

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the file extension is not supported
        """
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if self.file_path.suffix.lower() not in self.SUPPORTED_EXTENSIONS:
            raise ValueError(f"File must be .xlsx or .csv: {self.file_path.name}")

    def _read(self, sheet_name: str | int) -> pd.DataFrame:
        if self.file_path.suffix.lower() == ".csv":
            return pd.read_csv(self.file_path, dtype=str, keep_default_na=False)
        return pd.read_excel(
            self.file_path,
            sheet_name=sheet_name,
            engine="openpyxl",
            dtype=object,
        )

    @staticmethod
    def _cell_text(row: pd.Series, column: str) -> str:
        if column not in row.index:
            return ""
        value = row[column]
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return ""
        return str(value).strip()

    @staticmethod
    def _cell_date(row: pd.Series, column: str):
        """Date cells pass through as timestamps; text is stripped."""
        if column not in row.index:
            return None
        value = row[column]
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return None
        if isinstance(value, str):
            return value.strip() or None
        return value

    def parse(self, sheet_name: str | int = 0) -> List[Medicine]:
        """Parse the file into medicines, in file order.

        Args:
            sheet_name: Sheet name or index for Excel files (default: first sheet)

        Returns:
            List of Medicine records

        Raises:
            ValueError: If required columns are missing
        """
        df = self._read(sheet_name)

        if not self.REQUIRED_COLUMNS.issubset(df.columns):
            missing = self.REQUIRED_COLUMNS - set(df.columns)
            raise ValueError(f"Missing required columns: {missing}")

        medicines: List[Medicine] = []
        seen_ids = set()
        unnamed_rows = 0
        invalid_dates: List[str] = []
        unknown_rules = set()
        duplicate_ids = set()

        for _, row in df.iterrows():
            name = self._cell_text(row, "Name")
            if not name:
                unnamed_rows += 1
                continue

            try:
                expiry = parse_calendar_date(self._cell_date(row, "Expiry Date"), field_name="Expiry Date")
            except InvalidDateFormat:
                invalid_dates.append(name)
                continue

            rule_text = self._cell_text(row, "Rule").upper() or ShelfLifeRule.BOX_DATE.value
            try:
                rule = ShelfLifeRule(rule_text)
            except ValueError:
                unknown_rules.add(rule_text)
                continue

            opening: Optional[str] = None
            opening_raw = self._cell_date(row, "Opening Date")
            if opening_raw is not None:
                try:
                    opening = parse_calendar_date(opening_raw, field_name="Opening Date").isoformat()
                except InvalidDateFormat as e:
                    logger.warning("Ignoring opening date for %s: %s", name, e.message)

            fields = {
                "name": name,
                "dosage": self._cell_text(row, "Dosage"),
                "expiry_date": expiry.isoformat(),
                "opening_date": opening,
                "rule": rule,
            }

            medicine_id = self._cell_text(row, "ID")
            if medicine_id:
                if medicine_id in seen_ids:
                    duplicate_ids.add(medicine_id)
                    continue
                seen_ids.add(medicine_id)
                fields["id"] = medicine_id

            medicines.append(Medicine(**fields))

        # Warnings
        if unnamed_rows > 0:
            warnings.warn(
                f"Skipped {unnamed_rows} rows without a medicine name.",
                UserWarning
            )

        if invalid_dates:
            warnings.warn(
                f"Skipped {len(invalid_dates)} medicines with an invalid expiry date: {invalid_dates[:5]}{'...' if len(invalid_dates) > 5 else ''}",
                UserWarning
            )

        if unknown_rules:
            warnings.warn(
                f"Skipped rows with unknown expiration rules: {sorted(unknown_rules)}",
                UserWarning
            )

        if duplicate_ids:
            warnings.warn(
                f"Skipped rows repeating medicine IDs: {sorted(duplicate_ids)}",
                UserWarning
            )

        logger.info("Parsed %d medicines from %s", len(medicines), self.file_path.name)
        return medicines
