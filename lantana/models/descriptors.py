"""
Standard repository descriptor keys and values.

The repository interface defines a fixed set of descriptor constants. They are
listed here explicitly so `is_standard_descriptor` is a plain set lookup.
"""

from __future__ import annotations

from typing import Union

DescriptorValue = Union[str, list[str]]

# Repository identity
SPEC_VERSION_DESC = "jcr.specification.version"
SPEC_NAME_DESC = "jcr.specification.name"
REP_VENDOR_DESC = "jcr.repository.vendor"
REP_VENDOR_URL_DESC = "jcr.repository.vendor.url"
REP_NAME_DESC = "jcr.repository.name"
REP_VERSION_DESC = "jcr.repository.version"

# General
WRITE_SUPPORTED = "write.supported"
IDENTIFIER_STABILITY = "identifier.stability"
IDENTIFIER_STABILITY_METHOD_DURATION = "identifier.stability.method.duration"
IDENTIFIER_STABILITY_SAVE_DURATION = "identifier.stability.save.duration"
IDENTIFIER_STABILITY_SESSION_DURATION = "identifier.stability.session.duration"
IDENTIFIER_STABILITY_INDEFINITE_DURATION = "identifier.stability.indefinite.duration"

# Options
OPTION_XML_EXPORT_SUPPORTED = "option.xml.export.supported"
OPTION_XML_IMPORT_SUPPORTED = "option.xml.import.supported"
OPTION_UNFILED_CONTENT_SUPPORTED = "option.unfiled.content.supported"
OPTION_VERSIONING_SUPPORTED = "option.versioning.supported"
OPTION_SIMPLE_VERSIONING_SUPPORTED = "option.simple.versioning.supported"
OPTION_ACCESS_CONTROL_SUPPORTED = "option.access.control.supported"
OPTION_LOCKING_SUPPORTED = "option.locking.supported"
OPTION_OBSERVATION_SUPPORTED = "option.observation.supported"
OPTION_JOURNALED_OBSERVATION_SUPPORTED = "option.journaled.observation.supported"
OPTION_RETENTION_SUPPORTED = "option.retention.supported"
OPTION_LIFECYCLE_SUPPORTED = "option.lifecycle.supported"
OPTION_TRANSACTIONS_SUPPORTED = "option.transactions.supported"
OPTION_WORKSPACE_MANAGEMENT_SUPPORTED = "option.workspace.management.supported"
OPTION_UPDATE_PRIMARY_NODE_TYPE_SUPPORTED = "option.update.primary.node.type.supported"
OPTION_UPDATE_MIXIN_NODE_TYPES_SUPPORTED = "option.update.mixin.node.types.supported"
OPTION_SHAREABLE_NODES_SUPPORTED = "option.shareable.nodes.supported"
OPTION_NODE_TYPE_MANAGEMENT_SUPPORTED = "option.node.type.management.supported"
OPTION_NODE_AND_PROPERTY_WITH_SAME_NAME_SUPPORTED = (
    "option.node.and.property.with.same.name.supported"
)
OPTION_ACTIVITIES_SUPPORTED = "option.activities.supported"
OPTION_BASELINES_SUPPORTED = "option.baselines.supported"

# Node type management
NODE_TYPE_MANAGEMENT_INHERITANCE = "node.type.management.inheritance"
NODE_TYPE_MANAGEMENT_INHERITANCE_MINIMAL = "node.type.management.inheritance.minimal"
NODE_TYPE_MANAGEMENT_INHERITANCE_SINGLE = "node.type.management.inheritance.single"
NODE_TYPE_MANAGEMENT_INHERITANCE_MULTIPLE = "node.type.management.inheritance.multiple"
NODE_TYPE_MANAGEMENT_OVERRIDES_SUPPORTED = "node.type.management.overrides.supported"
NODE_TYPE_MANAGEMENT_PRIMARY_ITEM_NAME_SUPPORTED = (
    "node.type.management.primary.item.name.supported"
)
NODE_TYPE_MANAGEMENT_ORDERABLE_CHILD_NODES_SUPPORTED = (
    "node.type.management.orderable.child.nodes.supported"
)
NODE_TYPE_MANAGEMENT_RESIDUAL_DEFINITIONS_SUPPORTED = (
    "node.type.management.residual.definitions.supported"
)
NODE_TYPE_MANAGEMENT_AUTOCREATED_DEFINITIONS_SUPPORTED = (
    "node.type.management.autocreated.definitions.supported"
)
NODE_TYPE_MANAGEMENT_SAME_NAME_SIBLINGS_SUPPORTED = (
    "node.type.management.same.name.siblings.supported"
)
NODE_TYPE_MANAGEMENT_PROPERTY_TYPES = "node.type.management.property.types"
NODE_TYPE_MANAGEMENT_MULTIVALUED_PROPERTIES_SUPPORTED = (
    "node.type.management.multivalued.properties.supported"
)
NODE_TYPE_MANAGEMENT_MULTIPLE_BINARY_PROPERTIES_SUPPORTED = (
    "node.type.management.multiple.binary.properties.supported"
)
NODE_TYPE_MANAGEMENT_VALUE_CONSTRAINTS_SUPPORTED = (
    "node.type.management.value.constraints.supported"
)
# "suported" is the spelling the interface uses
NODE_TYPE_MANAGEMENT_UPDATE_IN_USE_SUPORTED = "node.type.management.update.in.use.suported"

# Query
QUERY_LANGUAGES = "query.languages"
QUERY_STORED_QUERIES_SUPPORTED = "query.stored.queries.supported"
QUERY_FULL_TEXT_SEARCH_SUPPORTED = "query.full.text.search.supported"
QUERY_JOINS = "query.joins"
QUERY_JOINS_NONE = "query.joins.none"
QUERY_JOINS_INNER = "query.joins.inner"
QUERY_JOINS_INNER_OUTER = "query.joins.inner.outer"

# Deprecated 1.0 descriptors, still part of the interface
LEVEL_1_SUPPORTED = "level.1.supported"
LEVEL_2_SUPPORTED = "level.2.supported"
OPTION_QUERY_SQL_SUPPORTED = "option.query.sql.supported"
QUERY_XPATH_POS_INDEX = "query.xpath.pos.index"
QUERY_XPATH_DOC_ORDER = "query.xpath.doc.order"


STANDARD_DESCRIPTORS: frozenset[str] = frozenset({
    SPEC_VERSION_DESC,
    SPEC_NAME_DESC,
    REP_VENDOR_DESC,
    REP_VENDOR_URL_DESC,
    REP_NAME_DESC,
    REP_VERSION_DESC,
    WRITE_SUPPORTED,
    IDENTIFIER_STABILITY,
    IDENTIFIER_STABILITY_METHOD_DURATION,
    IDENTIFIER_STABILITY_SAVE_DURATION,
    IDENTIFIER_STABILITY_SESSION_DURATION,
    IDENTIFIER_STABILITY_INDEFINITE_DURATION,
    OPTION_XML_EXPORT_SUPPORTED,
    OPTION_XML_IMPORT_SUPPORTED,
    OPTION_UNFILED_CONTENT_SUPPORTED,
    OPTION_VERSIONING_SUPPORTED,
    OPTION_SIMPLE_VERSIONING_SUPPORTED,
    OPTION_ACCESS_CONTROL_SUPPORTED,
    OPTION_LOCKING_SUPPORTED,
    OPTION_OBSERVATION_SUPPORTED,
    OPTION_JOURNALED_OBSERVATION_SUPPORTED,
    OPTION_RETENTION_SUPPORTED,
    OPTION_LIFECYCLE_SUPPORTED,
    OPTION_TRANSACTIONS_SUPPORTED,
    OPTION_WORKSPACE_MANAGEMENT_SUPPORTED,
    OPTION_UPDATE_PRIMARY_NODE_TYPE_SUPPORTED,
    OPTION_UPDATE_MIXIN_NODE_TYPES_SUPPORTED,
    OPTION_SHAREABLE_NODES_SUPPORTED,
    OPTION_NODE_TYPE_MANAGEMENT_SUPPORTED,
    OPTION_NODE_AND_PROPERTY_WITH_SAME_NAME_SUPPORTED,
    OPTION_ACTIVITIES_SUPPORTED,
    OPTION_BASELINES_SUPPORTED,
    NODE_TYPE_MANAGEMENT_INHERITANCE,
    NODE_TYPE_MANAGEMENT_INHERITANCE_MINIMAL,
    NODE_TYPE_MANAGEMENT_INHERITANCE_SINGLE,
    NODE_TYPE_MANAGEMENT_INHERITANCE_MULTIPLE,
    NODE_TYPE_MANAGEMENT_OVERRIDES_SUPPORTED,
    NODE_TYPE_MANAGEMENT_PRIMARY_ITEM_NAME_SUPPORTED,
    NODE_TYPE_MANAGEMENT_ORDERABLE_CHILD_NODES_SUPPORTED,
    NODE_TYPE_MANAGEMENT_RESIDUAL_DEFINITIONS_SUPPORTED,
    NODE_TYPE_MANAGEMENT_AUTOCREATED_DEFINITIONS_SUPPORTED,
    NODE_TYPE_MANAGEMENT_SAME_NAME_SIBLINGS_SUPPORTED,
    NODE_TYPE_MANAGEMENT_PROPERTY_TYPES,
    NODE_TYPE_MANAGEMENT_MULTIVALUED_PROPERTIES_SUPPORTED,
    NODE_TYPE_MANAGEMENT_MULTIPLE_BINARY_PROPERTIES_SUPPORTED,
    NODE_TYPE_MANAGEMENT_VALUE_CONSTRAINTS_SUPPORTED,
    NODE_TYPE_MANAGEMENT_UPDATE_IN_USE_SUPORTED,
    QUERY_LANGUAGES,
    QUERY_STORED_QUERIES_SUPPORTED,
    QUERY_FULL_TEXT_SEARCH_SUPPORTED,
    QUERY_JOINS,
    QUERY_JOINS_NONE,
    QUERY_JOINS_INNER,
    QUERY_JOINS_INNER_OUTER,
    LEVEL_1_SUPPORTED,
    LEVEL_2_SUPPORTED,
    OPTION_QUERY_SQL_SUPPORTED,
    QUERY_XPATH_POS_INDEX,
    QUERY_XPATH_DOC_ORDER,
})


def is_standard_descriptor(key: str) -> bool:
    """Check whether a key is one of the standard descriptor constants."""
    return key in STANDARD_DESCRIPTORS
