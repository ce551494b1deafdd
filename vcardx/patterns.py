import re

patterns = {
    "newline": r"\r\n|\r|\n",
    # "=" not followed by two hex digits
    "bad_qp_escape": r"=(?![0-9A-Fa-f]{2})",
    # characters that may not appear in group or property names
    "bad_name_char": r"[.;:\r\n]",
    # 2.1 parameter values may not contain these
    "bad_old_param_char": r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f,.:=\[\]]",
    "control_char": r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]",
    "utc_offset": r"^(?P<sign>[-+])(?P<hours>\d{1,2}):?(?P<minutes>\d{2})?$",
}

# RFC 6350 reduced accuracy and truncated dates, e.g. "--0415", "1985-04", "T1022"
patterns["date"] = r"(?:\d{4}(?:-?\d{2}){0,2}|--\d{2}(?:-?\d{2})?|---\d{2})"
patterns["time"] = r"(?:\d{2}(?::?\d{2}){0,2}|-\d{2}(?::?\d{2})?|--\d{2})(?:Z|[-+]\d{2}(?::?\d{2})?)?"
patterns["partial_date"] = r"^(?:{date!s}(?:T{time!s})?|T{time!s})$".format(**patterns)

newline_re = re.compile(patterns["newline"])
bad_qp_escape_re = re.compile(patterns["bad_qp_escape"])
bad_name_char_re = re.compile(patterns["bad_name_char"])
bad_old_param_char_re = re.compile(patterns["bad_old_param_char"])
control_char_re = re.compile(patterns["control_char"])
utc_offset_re = re.compile(patterns["utc_offset"])
partial_date_re = re.compile(patterns["partial_date"])
full_date_re = re.compile(r"^\d{4}-?\d{2}-?\d{2}(?:T.+)?$", re.IGNORECASE)
