# ─────────────────────────────────────────────
# CONSTANTS
# ─────────────────────────────────────────────

# Type inference: share of non-missing values that must parse
NUMERIC_RATIO_THRESHOLD = 0.8      # > 80% parse as numbers → numeric
DATETIME_RATIO_THRESHOLD = 0.8     # > 80% parse as dates   → datetime
CATEGORICAL_UNIQUE_RATIO = 0.1     # distinct / total < 10% → categorical

# Anomaly detection: IQR multiplier (Tukey fences)
IQR_MULTIPLIER = 1.5

# Missingness above this percentage is reported as an anomaly
MISSING_ANOMALY_THRESHOLD = 20.0

# Data quality score weights
QUALITY_BASE_SCORE = 100.0
MISSING_PENALTY_WEIGHT = 0.5       # per percentage point of average missingness
ANOMALY_PENALTY = 2.0              # flat, per anomaly of any kind
NUMERIC_BONUS = 5.0                # at least one numeric column present

# Pattern tag thresholds
LOW_CARDINALITY_THRESHOLD = 10
HIGH_CARDINALITY_THRESHOLD = 100
LONG_TEXT_THRESHOLD = 100
SHORT_TEXT_THRESHOLD = 10
WIDE_RANGE_THRESHOLD = 1000

# Payload caps
VALUE_SAMPLE_SIZE = 10             # raw values kept for text/datetime columns
OUTLIER_SAMPLE_SIZE = 5            # outlier values copied into an anomaly
ROW_SAMPLE_SIZE = 100              # raw rows carried on the profile

# Trend detection needs at least this many dated points
MIN_TREND_POINTS = 3
