"""Compiled-in issue catalog.

Single source of truth for every issue the analysis tool can report.  Each
row declares the stable numeric code, the upper-snake identifier, the
default level (or ``INHERIT`` plus the parent identifier), the category and,
for API lint issues, the style-guide rule it enforces.

Issue names are never declared separately: ``camel_case_name`` derives them
from the identifier (``ADDED_PACKAGE`` -> ``AddedPackage``), so config files
can address issues by a predictable name.

Codes are never reused.  When an issue is renumbered its old code moves to
``RETIRED_CODES``.
"""

from __future__ import annotations

from typing import NamedTuple

from api_issues.errors import CatalogError
from api_issues.model import INHERIT, Category, Level, Severity


class IssueSpec(NamedTuple):
    """One row of the catalog table."""

    code: int
    declared_id: str
    level: Level
    category: Category = Category.UNKNOWN
    parent: str | None = None
    rule: str | None = None
    explanation: str | None = None


HIDDEN = Severity.HIDDEN
INFO = Severity.INFO
LINT = Severity.LINT
WARNING = Severity.WARNING
ERROR = Severity.ERROR

COMPATIBILITY = Category.COMPATIBILITY
DOCUMENTATION = Category.DOCUMENTATION
API_LINT = Category.API_LINT

# Declaration order is preserved by the registry.
CATALOG: tuple[IssueSpec, ...] = (
    # ── API verification ────────────────────────────────────────────
    IssueSpec(1, "PARSE_ERROR", ERROR),
    IssueSpec(2, "ADDED_PACKAGE", WARNING, COMPATIBILITY),
    IssueSpec(3, "ADDED_CLASS", WARNING, COMPATIBILITY),
    IssueSpec(4, "ADDED_METHOD", WARNING, COMPATIBILITY),
    IssueSpec(5, "ADDED_FIELD", WARNING, COMPATIBILITY),
    IssueSpec(6, "ADDED_INTERFACE", WARNING, COMPATIBILITY),
    IssueSpec(7, "REMOVED_PACKAGE", WARNING, COMPATIBILITY),
    IssueSpec(8, "REMOVED_CLASS", WARNING, COMPATIBILITY),
    IssueSpec(9, "REMOVED_METHOD", WARNING, COMPATIBILITY),
    IssueSpec(10, "REMOVED_FIELD", WARNING, COMPATIBILITY),
    IssueSpec(11, "REMOVED_INTERFACE", WARNING, COMPATIBILITY),
    IssueSpec(12, "CHANGED_STATIC", WARNING, COMPATIBILITY),
    IssueSpec(13, "ADDED_FINAL", WARNING, COMPATIBILITY),
    IssueSpec(14, "CHANGED_TRANSIENT", WARNING, COMPATIBILITY),
    IssueSpec(15, "CHANGED_VOLATILE", WARNING, COMPATIBILITY),
    IssueSpec(16, "CHANGED_TYPE", WARNING, COMPATIBILITY),
    IssueSpec(17, "CHANGED_VALUE", WARNING, COMPATIBILITY),
    IssueSpec(18, "CHANGED_SUPERCLASS", WARNING, COMPATIBILITY),
    IssueSpec(19, "CHANGED_SCOPE", WARNING, COMPATIBILITY),
    IssueSpec(20, "CHANGED_ABSTRACT", WARNING, COMPATIBILITY),
    IssueSpec(21, "CHANGED_THROWS", WARNING, COMPATIBILITY),
    IssueSpec(22, "CHANGED_NATIVE", HIDDEN, COMPATIBILITY),
    IssueSpec(23, "CHANGED_CLASS", WARNING, COMPATIBILITY),
    IssueSpec(24, "CHANGED_DEPRECATED", WARNING, COMPATIBILITY),
    IssueSpec(25, "CHANGED_SYNCHRONIZED", WARNING, COMPATIBILITY),
    IssueSpec(26, "ADDED_FINAL_UNINSTANTIABLE", WARNING, COMPATIBILITY),
    IssueSpec(27, "REMOVED_FINAL", WARNING, COMPATIBILITY),
    IssueSpec(28, "REMOVED_DEPRECATED_CLASS", INHERIT, COMPATIBILITY, parent="REMOVED_CLASS"),
    IssueSpec(29, "REMOVED_DEPRECATED_METHOD", INHERIT, COMPATIBILITY, parent="REMOVED_METHOD"),
    IssueSpec(30, "REMOVED_DEPRECATED_FIELD", INHERIT, COMPATIBILITY, parent="REMOVED_FIELD"),
    IssueSpec(31, "ADDED_ABSTRACT_METHOD", INHERIT, COMPATIBILITY, parent="ADDED_METHOD"),
    IssueSpec(32, "ADDED_REIFIED", WARNING, COMPATIBILITY),

    # ── Documentation generation ────────────────────────────────────
    IssueSpec(101, "UNRESOLVED_LINK", LINT, DOCUMENTATION),
    IssueSpec(102, "BAD_INCLUDE_TAG", LINT, DOCUMENTATION),
    IssueSpec(103, "UNKNOWN_TAG", LINT, DOCUMENTATION),
    IssueSpec(104, "UNKNOWN_PARAM_TAG_NAME", LINT, DOCUMENTATION),
    IssueSpec(105, "UNDOCUMENTED_PARAMETER", HIDDEN, DOCUMENTATION),
    IssueSpec(106, "BAD_ATTR_TAG", LINT, DOCUMENTATION),
    IssueSpec(107, "BAD_INHERITDOC", HIDDEN, DOCUMENTATION),
    IssueSpec(108, "HIDDEN_LINK", LINT, DOCUMENTATION),
    IssueSpec(109, "HIDDEN_CONSTRUCTOR", WARNING, DOCUMENTATION),
    IssueSpec(110, "UNAVAILABLE_SYMBOL", WARNING, DOCUMENTATION),
    IssueSpec(111, "HIDDEN_SUPERCLASS", WARNING, DOCUMENTATION),
    IssueSpec(112, "DEPRECATED", HIDDEN, DOCUMENTATION),
    IssueSpec(113, "DEPRECATION_MISMATCH", ERROR, DOCUMENTATION),
    IssueSpec(114, "MISSING_COMMENT", LINT, DOCUMENTATION),
    IssueSpec(115, "IO_ERROR", ERROR),
    IssueSpec(116, "NO_SINCE_DATA", HIDDEN, DOCUMENTATION),
    IssueSpec(117, "NO_FEDERATION_DATA", WARNING, DOCUMENTATION),
    IssueSpec(118, "BROKEN_SINCE_FILE", ERROR, DOCUMENTATION),
    IssueSpec(119, "INVALID_CONTENT_TYPE", ERROR, DOCUMENTATION),
    IssueSpec(120, "INVALID_SAMPLE_INDEX", ERROR, DOCUMENTATION),
    IssueSpec(121, "HIDDEN_TYPE_PARAMETER", WARNING, DOCUMENTATION),
    IssueSpec(122, "PRIVATE_SUPERCLASS", WARNING, DOCUMENTATION),
    IssueSpec(123, "NULLABLE", HIDDEN, DOCUMENTATION),
    IssueSpec(124, "INT_DEF", HIDDEN, DOCUMENTATION),
    IssueSpec(125, "REQUIRES_PERMISSION", LINT, DOCUMENTATION),
    IssueSpec(126, "BROADCAST_BEHAVIOR", LINT, DOCUMENTATION),
    IssueSpec(127, "SDK_CONSTANT", LINT, DOCUMENTATION),
    IssueSpec(128, "TODO", LINT, DOCUMENTATION),
    IssueSpec(129, "NO_ARTIFACT_DATA", HIDDEN, DOCUMENTATION),
    IssueSpec(130, "BROKEN_ARTIFACT_FILE", ERROR, DOCUMENTATION),

    # ── Extended checks ─────────────────────────────────────────────
    IssueSpec(131, "TYPO", WARNING, DOCUMENTATION),
    IssueSpec(132, "MISSING_PERMISSION", LINT, DOCUMENTATION),
    IssueSpec(133, "MULTIPLE_THREAD_ANNOTATIONS", LINT, DOCUMENTATION),
    IssueSpec(134, "UNRESOLVED_CLASS", LINT, DOCUMENTATION),
    IssueSpec(135, "INVALID_NULL_CONVERSION", ERROR, COMPATIBILITY),
    IssueSpec(136, "PARAMETER_NAME_CHANGE", ERROR, COMPATIBILITY),
    IssueSpec(137, "OPERATOR_REMOVAL", ERROR, COMPATIBILITY),
    IssueSpec(138, "INFIX_REMOVAL", ERROR, COMPATIBILITY),
    IssueSpec(139, "VARARG_REMOVAL", ERROR, COMPATIBILITY),
    IssueSpec(140, "ADD_SEALED", ERROR, COMPATIBILITY),
    IssueSpec(146, "ANNOTATION_EXTRACTION", ERROR),
    IssueSpec(147, "SUPERFLUOUS_PREFIX", WARNING),
    IssueSpec(148, "HIDDEN_TYPEDEF_CONSTANT", ERROR),
    IssueSpec(149, "EXPECTED_PLATFORM_TYPE", HIDDEN),
    IssueSpec(150, "INTERNAL_ERROR", ERROR),
    IssueSpec(151, "RETURNING_UNEXPECTED_CONSTANT", WARNING),
    IssueSpec(152, "DEPRECATED_OPTION", WARNING),
    IssueSpec(153, "BOTH_PACKAGE_INFO_AND_HTML", WARNING, DOCUMENTATION),
    IssueSpec(154, "REFERENCES_DEPRECATED", HIDDEN),
    IssueSpec(155, "UNHIDDEN_SYSTEM_API", ERROR),
    IssueSpec(156, "SHOWING_MEMBER_IN_HIDDEN_CLASS", ERROR),
    IssueSpec(157, "INVALID_NULLABILITY_ANNOTATION", ERROR),
    IssueSpec(158, "REFERENCES_HIDDEN", ERROR),
    IssueSpec(159, "IGNORING_SYMLINK", INFO),
    IssueSpec(160, "INVALID_NULLABILITY_ANNOTATION_WARNING", WARNING),
    IssueSpec(161, "EXTENDS_DEPRECATED", HIDDEN),
    IssueSpec(162, "FORBIDDEN_TAG", ERROR),
    IssueSpec(163, "MISSING_COLUMN", WARNING, DOCUMENTATION),
    IssueSpec(164, "INVALID_SYNTAX", ERROR),

    # ── API lint ────────────────────────────────────────────────────
    IssueSpec(300, "START_WITH_LOWER", ERROR, API_LINT, rule="S1"),
    IssueSpec(301, "START_WITH_UPPER", ERROR, API_LINT, rule="S1"),
    IssueSpec(302, "ALL_UPPER", ERROR, API_LINT, rule="C2"),
    IssueSpec(303, "ACRONYM_NAME", WARNING, API_LINT, rule="S1"),
    IssueSpec(304, "ENUM", ERROR, API_LINT, rule="F5"),
    IssueSpec(305, "ENDS_WITH_IMPL", ERROR, API_LINT),
    IssueSpec(306, "MIN_MAX_CONSTANT", WARNING, API_LINT, rule="C8"),
    IssueSpec(307, "COMPILE_TIME_CONSTANT", ERROR, API_LINT),
    IssueSpec(308, "SINGULAR_CALLBACK", ERROR, API_LINT, rule="L1"),
    IssueSpec(309, "CALLBACK_NAME", WARNING, API_LINT, rule="L1"),
    IssueSpec(310, "CALLBACK_INTERFACE", ERROR, API_LINT, rule="CL3"),
    IssueSpec(311, "CALLBACK_METHOD_NAME", ERROR, API_LINT, rule="L1"),
    IssueSpec(312, "LISTENER_INTERFACE", ERROR, API_LINT, rule="L1"),
    IssueSpec(313, "SINGLE_METHOD_INTERFACE", ERROR, API_LINT, rule="L1"),
    IssueSpec(314, "INTENT_NAME", ERROR, API_LINT, rule="C3"),
    IssueSpec(315, "ACTION_VALUE", ERROR, API_LINT, rule="C4"),
    IssueSpec(316, "EQUALS_AND_HASH_CODE", ERROR, API_LINT, rule="M8"),
    IssueSpec(317, "PARCEL_CREATOR", ERROR, API_LINT, rule="FW3"),
    IssueSpec(318, "PARCEL_NOT_FINAL", ERROR, API_LINT, rule="FW8"),
    IssueSpec(319, "PARCEL_CONSTRUCTOR", ERROR, API_LINT, rule="FW3"),
    IssueSpec(320, "PROTECTED_MEMBER", ERROR, API_LINT, rule="M7"),
    IssueSpec(321, "PAIRED_REGISTRATION", ERROR, API_LINT, rule="L2"),
    IssueSpec(322, "REGISTRATION_NAME", ERROR, API_LINT, rule="L3"),
    IssueSpec(323, "VISIBLY_SYNCHRONIZED", ERROR, API_LINT, rule="M5"),
    IssueSpec(324, "INTENT_BUILDER_NAME", WARNING, API_LINT, rule="FW1"),
    IssueSpec(325, "CONTEXT_NAME_SUFFIX", ERROR, API_LINT, rule="C4"),
    IssueSpec(326, "INTERFACE_CONSTANT", ERROR, API_LINT, rule="C4"),
    IssueSpec(327, "ON_NAME_EXPECTED", WARNING, API_LINT),
    IssueSpec(328, "TOP_LEVEL_BUILDER", WARNING, API_LINT),
    IssueSpec(329, "MISSING_BUILD_METHOD", WARNING, API_LINT),
    IssueSpec(330, "BUILDER_SET_STYLE", WARNING, API_LINT),
    IssueSpec(331, "SETTER_RETURNS_THIS", WARNING, API_LINT, rule="M4"),
    IssueSpec(332, "RAW_AIDL", ERROR, API_LINT),
    IssueSpec(333, "INTERNAL_CLASSES", ERROR, API_LINT),
    IssueSpec(334, "PACKAGE_LAYERING", WARNING, API_LINT, rule="FW6"),
    IssueSpec(335, "GETTER_SETTER_NAMES", ERROR, API_LINT, rule="M6"),
    IssueSpec(336, "CONCRETE_COLLECTION", ERROR, API_LINT, rule="CL2"),
    IssueSpec(337, "OVERLAPPING_CONSTANTS", WARNING, API_LINT, rule="C1"),
    IssueSpec(338, "GENERIC_EXCEPTION", ERROR, API_LINT, rule="S1"),
    IssueSpec(339, "ILLEGAL_STATE_EXCEPTION", WARNING, API_LINT, rule="S1"),
    IssueSpec(340, "RETHROW_REMOTE_EXCEPTION", ERROR, API_LINT, rule="FW9"),
    IssueSpec(341, "MENTIONS_GOOGLE", ERROR, API_LINT),
    IssueSpec(342, "HEAVY_BIT_SET", ERROR, API_LINT),
    IssueSpec(343, "MANAGER_CONSTRUCTOR", ERROR, API_LINT),
    IssueSpec(344, "MANAGER_LOOKUP", ERROR, API_LINT),
    IssueSpec(345, "AUTO_BOXING", ERROR, API_LINT, rule="M11"),
    IssueSpec(346, "STATIC_UTILS", ERROR, API_LINT),
    IssueSpec(347, "CONTEXT_FIRST", ERROR, API_LINT, rule="M3"),
    IssueSpec(348, "LISTENER_LAST", WARNING, API_LINT, rule="M3"),
    IssueSpec(349, "EXECUTOR_REGISTRATION", WARNING, API_LINT, rule="L1"),
    IssueSpec(350, "CONFIG_FIELD_NAME", ERROR, API_LINT),
    IssueSpec(351, "RESOURCE_FIELD_NAME", ERROR, API_LINT),
    IssueSpec(352, "RESOURCE_VALUE_FIELD_NAME", ERROR, API_LINT, rule="C7"),
    IssueSpec(353, "RESOURCE_STYLE_FIELD_NAME", ERROR, API_LINT, rule="C7"),
    IssueSpec(354, "STREAM_FILES", WARNING, API_LINT, rule="M10"),
    IssueSpec(355, "PARCELABLE_LIST", WARNING, API_LINT),
    IssueSpec(356, "ABSTRACT_INNER", WARNING, API_LINT),
    IssueSpec(358, "BANNED_THROW", ERROR, API_LINT),
    IssueSpec(359, "EXTENDS_ERROR", ERROR, API_LINT),
    IssueSpec(360, "EXCEPTION_NAME", ERROR, API_LINT),
    IssueSpec(361, "METHOD_NAME_UNITS", ERROR, API_LINT),
    IssueSpec(362, "FRACTION_FLOAT", ERROR, API_LINT),
    IssueSpec(363, "PERCENTAGE_INT", ERROR, API_LINT),
    IssueSpec(364, "NOT_CLOSEABLE", WARNING, API_LINT),
    IssueSpec(365, "KOTLIN_OPERATOR", INFO, API_LINT),
    IssueSpec(366, "ARRAY_RETURN", WARNING, API_LINT),
    IssueSpec(367, "USER_HANDLE", WARNING, API_LINT),
    IssueSpec(368, "USER_HANDLE_NAME", WARNING, API_LINT),
    IssueSpec(369, "SERVICE_NAME", ERROR, API_LINT, rule="C4"),
    IssueSpec(370, "METHOD_NAME_TENSE", WARNING, API_LINT),
    IssueSpec(371, "NO_CLONE", ERROR, API_LINT),
    IssueSpec(372, "USE_ICU", WARNING, API_LINT),
    IssueSpec(373, "USE_PARCEL_FILE_DESCRIPTOR", ERROR, API_LINT, rule="FW11"),
    IssueSpec(374, "NO_BYTE_OR_SHORT", WARNING, API_LINT, rule="FW12"),
    IssueSpec(375, "SINGLETON_CONSTRUCTOR", ERROR, API_LINT),
    IssueSpec(376, "COMMON_ARGS_FIRST", WARNING, API_LINT, rule="M2"),
    IssueSpec(377, "CONSISTENT_ARGUMENT_ORDER", ERROR, API_LINT, rule="M2"),
    IssueSpec(378, "KOTLIN_KEYWORD", ERROR, API_LINT),  # formerly 141
    IssueSpec(379, "UNIQUE_KOTLIN_OPERATOR", ERROR, API_LINT),
    IssueSpec(380, "SAM_SHOULD_BE_LAST", WARNING, API_LINT),  # formerly 142
    IssueSpec(381, "MISSING_JVMSTATIC", WARNING, API_LINT),  # formerly 143
    IssueSpec(382, "DEFAULT_VALUE_CHANGE", ERROR, API_LINT),  # formerly 144
    IssueSpec(383, "DOCUMENT_EXCEPTIONS", ERROR, API_LINT),  # formerly 145
    IssueSpec(384, "FORBIDDEN_SUPER_CLASS", ERROR, API_LINT),
    IssueSpec(385, "MISSING_NULLABILITY", ERROR, API_LINT),
    IssueSpec(386, "MUTABLE_BARE_FIELD", ERROR, API_LINT, rule="F2"),
    IssueSpec(387, "INTERNAL_FIELD", ERROR, API_LINT, rule="F2"),
    IssueSpec(388, "PUBLIC_TYPEDEF", ERROR, API_LINT, rule="FW15"),
    IssueSpec(389, "ANDROID_URI", ERROR, API_LINT, rule="FW14"),
)

# Codes that belonged to issues since renumbered; must stay unused.
RETIRED_CODES: dict[int, str] = {
    141: "KOTLIN_KEYWORD",
    142: "SAM_SHOULD_BE_LAST",
    143: "MISSING_JVMSTATIC",
    144: "DEFAULT_VALUE_CHANGE",
    145: "DOCUMENT_EXCEPTIONS",
}


def camel_case_name(declared_id: str) -> str:
    """Derive an issue name from its declared identifier.

    Lower-cases the identifier, splits on underscores and capitalises each
    piece: ``REMOVED_DEPRECATED_CLASS`` -> ``RemovedDeprecatedClass``.
    """
    parts = declared_id.lower().split("_")
    return "".join(p[:1].upper() + p[1:] for p in parts if p)


def validate_catalog(rows: tuple[IssueSpec, ...]) -> None:
    """Fail fast on invariant violations.

    Codes, identifiers and derived names are unique (names compared
    case-insensitively), no retired code is reused, and every inherited row
    names a declared parent without forming a cycle.
    """
    codes: set[int] = set()
    names: dict[str, str] = {}
    by_id: dict[str, IssueSpec] = {}

    for row in rows:
        if row.code in codes:
            raise CatalogError(f"duplicate issue code {row.code} ({row.declared_id})")
        if row.code in RETIRED_CODES:
            raise CatalogError(
                f"issue code {row.code} is retired "
                f"(was {RETIRED_CODES[row.code]}); pick a new code"
            )
        if row.declared_id in by_id:
            raise CatalogError(f"duplicate issue identifier {row.declared_id}")

        folded = camel_case_name(row.declared_id).lower()
        if folded in names:
            raise CatalogError(
                f"issue name of {row.declared_id} collides with {names[folded]}"
            )

        codes.add(row.code)
        names[folded] = row.declared_id
        by_id[row.declared_id] = row

    for row in rows:
        if row.level is not INHERIT:
            if row.parent is not None:
                raise CatalogError(
                    f"{row.declared_id} declares both a level and a parent"
                )
            continue
        seen = [row.declared_id]
        parent = row.parent
        while True:
            if parent is None:
                raise CatalogError(
                    f"{seen[-1]} inherits its level but has no parent"
                )
            if parent not in by_id:
                raise CatalogError(
                    f"{seen[-1]} inherits from undeclared issue {parent}"
                )
            if parent in seen:
                raise CatalogError(
                    "inheritance cycle: " + " -> ".join(seen + [parent])
                )
            seen.append(parent)
            if by_id[parent].level is not INHERIT:
                break
            parent = by_id[parent].parent


validate_catalog(CATALOG)
