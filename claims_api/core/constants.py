from .enums import ClaimField, FieldType

# Header order of an uploaded claims file
CLAIM_COLUMNS = [field.value for field in ClaimField]

COLUMN_TYPES = {
    ClaimField.CLAIM_ID.value: FieldType.STRING,
    ClaimField.MEMBER_ID.value: FieldType.STRING,
    ClaimField.SERVICE_DATE.value: FieldType.DATE,
    ClaimField.TOTAL_AMOUNT.value: FieldType.INTEGER,
    ClaimField.DIAGNOSIS_CODES.value: FieldType.STRING,
}

DEFAULT_SORT_KEY = ClaimField.CLAIM_ID.value

DIAGNOSIS_CODE_SEPARATOR = ", "

# Row number reported for failures that abort the whole upload
DECODE_ERROR_ROW = 0

# Header occupies row 1
FIRST_DATA_ROW = 2

DUPLICATE_CLAIM_ID_MESSAGE = "Duplicate claimId"

LOG_EXCLUDE_PATHS = [
    "/health",
    "/docs",
    "/openapi.json",
]
