"""Tool Envelope — the {success, data?, error?, metadata?} shape every tool returns.

Invariants:
    - success=True envelopes always carry `data`; metadata only when non-empty
    - Error envelopes are built by DeliberateError.to_tool_result() or tool_error()
"""


def tool_ok(data: object, **metadata: object) -> dict:
    envelope: dict = {"success": True, "data": data}
    meta = {k: v for k, v in metadata.items() if v is not None}
    if meta:
        envelope["metadata"] = meta
    return envelope


def tool_error(code: str, message: str, category: str = "internal") -> dict:
    return {
        "success": False,
        "error": {
            "code": code,
            "message": message,
            "category": category,
            "severity": "error",
            "recoverable": category != "internal",
        },
    }
