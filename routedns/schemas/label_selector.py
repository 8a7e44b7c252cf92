SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",

    "type": "object",
    "properties": {
        "matchLabels": {
            "type": ["object", "null"],
            "additionalProperties": {"type": "string"},
        },
        "matchExpressions": {
            "type": ["array", "null"],
            "items": {
                "type": "object",
                "properties": {
                    "key": {"type": "string", "minLength": 1},
                    "operator": {
                        "type": "string",
                        "enum": ["In", "NotIn", "Exists", "DoesNotExist"],
                    },
                    "values": {
                        "type": ["array", "null"],
                        "items": {"type": "string"},
                    },
                },
                "required": ["key", "operator"],
                "allOf": [
                    {
                        "if": {"properties": {"operator": {"enum": ["In", "NotIn"]}}},
                        "then": {
                            "properties": {"values": {"type": "array", "minItems": 1}},
                            "required": ["values"],
                        },
                    },
                    {
                        "if": {
                            "properties": {"operator": {"enum": ["Exists", "DoesNotExist"]}}
                        },
                        "then": {
                            "properties": {"values": {"type": ["array", "null"], "maxItems": 0}},
                        },
                    },
                ],
            },
        },
    },
}
