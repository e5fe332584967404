"""Symbol table for information schema names and fixed cell values.

Every relation name, column name and literal the synthesizers emit is
declared here once.
"""

# Name of the introspection namespace; the user namespace is the empty string
INFORMATION_SCHEMA = "INFORMATION_SCHEMA"
USER_SCHEMA = ""
DEFAULT_CATALOG = ""


class View:
    """Relation names."""

    SCHEMATA = "SCHEMATA"
    SPANNER_STATISTICS = "SPANNER_STATISTICS"
    DATABASE_OPTIONS = "DATABASE_OPTIONS"
    TABLES = "TABLES"
    COLUMNS = "COLUMNS"
    COLUMN_COLUMN_USAGE = "COLUMN_COLUMN_USAGE"
    INDEXES = "INDEXES"
    INDEX_COLUMNS = "INDEX_COLUMNS"
    COLUMN_OPTIONS = "COLUMN_OPTIONS"
    TABLE_CONSTRAINTS = "TABLE_CONSTRAINTS"
    CHECK_CONSTRAINTS = "CHECK_CONSTRAINTS"
    CONSTRAINT_TABLE_USAGE = "CONSTRAINT_TABLE_USAGE"
    REFERENTIAL_CONSTRAINTS = "REFERENTIAL_CONSTRAINTS"
    KEY_COLUMN_USAGE = "KEY_COLUMN_USAGE"
    CONSTRAINT_COLUMN_USAGE = "CONSTRAINT_COLUMN_USAGE"


class Col:
    """Column names shared across relations."""

    # Namespaces
    CATALOG_NAME = "CATALOG_NAME"
    SCHEMA_NAME = "SCHEMA_NAME"
    TABLE_CATALOG = "TABLE_CATALOG"
    TABLE_SCHEMA = "TABLE_SCHEMA"
    TABLE_NAME = "TABLE_NAME"
    CONSTRAINT_CATALOG = "CONSTRAINT_CATALOG"
    CONSTRAINT_SCHEMA = "CONSTRAINT_SCHEMA"
    CONSTRAINT_NAME = "CONSTRAINT_NAME"
    UNIQUE_CONSTRAINT_CATALOG = "UNIQUE_CONSTRAINT_CATALOG"
    UNIQUE_CONSTRAINT_SCHEMA = "UNIQUE_CONSTRAINT_SCHEMA"
    UNIQUE_CONSTRAINT_NAME = "UNIQUE_CONSTRAINT_NAME"

    # SPANNER_STATISTICS
    PACKAGE_NAME = "PACKAGE_NAME"
    ALLOW_GC = "ALLOW_GC"

    # Options
    OPTION_NAME = "OPTION_NAME"
    OPTION_TYPE = "OPTION_TYPE"
    OPTION_VALUE = "OPTION_VALUE"

    # TABLES
    TABLE_TYPE = "TABLE_TYPE"
    PARENT_TABLE_NAME = "PARENT_TABLE_NAME"
    ON_DELETE_ACTION = "ON_DELETE_ACTION"
    SPANNER_STATE = "SPANNER_STATE"
    ROW_DELETION_POLICY_EXPRESSION = "ROW_DELETION_POLICY_EXPRESSION"

    # COLUMNS
    COLUMN_NAME = "COLUMN_NAME"
    ORDINAL_POSITION = "ORDINAL_POSITION"
    COLUMN_DEFAULT = "COLUMN_DEFAULT"
    DATA_TYPE = "DATA_TYPE"
    IS_NULLABLE = "IS_NULLABLE"
    SPANNER_TYPE = "SPANNER_TYPE"
    IS_GENERATED = "IS_GENERATED"
    GENERATION_EXPRESSION = "GENERATION_EXPRESSION"
    IS_STORED = "IS_STORED"
    DEPENDENT_COLUMN = "DEPENDENT_COLUMN"

    # INDEXES / INDEX_COLUMNS
    INDEX_NAME = "INDEX_NAME"
    INDEX_TYPE = "INDEX_TYPE"
    IS_UNIQUE = "IS_UNIQUE"
    IS_NULL_FILTERED = "IS_NULL_FILTERED"
    INDEX_STATE = "INDEX_STATE"
    SPANNER_IS_MANAGED = "SPANNER_IS_MANAGED"
    COLUMN_ORDERING = "COLUMN_ORDERING"

    # Constraints
    CONSTRAINT_TYPE = "CONSTRAINT_TYPE"
    IS_DEFERRABLE = "IS_DEFERRABLE"
    INITIALLY_DEFERRED = "INITIALLY_DEFERRED"
    ENFORCED = "ENFORCED"
    CHECK_CLAUSE = "CHECK_CLAUSE"
    MATCH_OPTION = "MATCH_OPTION"
    UPDATE_RULE = "UPDATE_RULE"
    DELETE_RULE = "DELETE_RULE"
    POSITION_IN_UNIQUE_CONSTRAINT = "POSITION_IN_UNIQUE_CONSTRAINT"


YES = "YES"
NO = "NO"


class TableType:
    BASE_TABLE = "BASE TABLE"
    VIEW = "VIEW"


class State:
    COMMITTED = "COMMITTED"
    READ_WRITE = "READ_WRITE"


class Generated:
    ALWAYS = "ALWAYS"
    NEVER = "NEVER"


class IndexType:
    INDEX = "INDEX"
    PRIMARY_KEY = "PRIMARY_KEY"


class Ordering:
    ASC = "ASC"
    DESC = "DESC"


class ConstraintType:
    PRIMARY_KEY = "PRIMARY KEY"
    CHECK = "CHECK"
    FOREIGN_KEY = "FOREIGN KEY"
    UNIQUE = "UNIQUE"


class Rule:
    """Referential constraint rules; cascading actions are not modeled."""

    SIMPLE = "SIMPLE"
    NO_ACTION = "NO ACTION"


class Option:
    DATABASE_DIALECT = "database_dialect"
    ALLOW_COMMIT_TIMESTAMP = "allow_commit_timestamp"
    STRING = "STRING"
    BOOL = "BOOL"
    TRUE = "TRUE"
    GOOGLE_STANDARD_SQL = "GOOGLE_STANDARD_SQL"


# Synthetic constraint naming
PRIMARY_KEY_PREFIX = "PK_"
NOT_NULL_CHECK_PREFIX = "CK_IS_NOT_NULL_"
NOT_NULL_CLAUSE_SUFFIX = " IS NOT NULL"
