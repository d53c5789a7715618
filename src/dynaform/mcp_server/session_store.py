# Global session store for MCP connections

import weakref

from dynaform.state import FormState

# Store one live form per session
# Key: MCP session object, Value: FormState
# Entries go away with their session, so a closed connection's form is never reused
session_forms: "weakref.WeakKeyDictionary[object, FormState]" = weakref.WeakKeyDictionary()

# Form used when a call arrives outside any session
default_form: FormState | None = None


def get_session_form(session: object | None = None) -> FormState:
    """Get the form of a session, loading it on first use."""
    global default_form
    if session is None:
        if default_form is None:
            default_form = FormState()
        return default_form

    form = session_forms.get(session)
    if form is None:
        form = FormState()
        session_forms[session] = form
    return form


def drop_session_form(session: object | None) -> None:
    """Forget the form of a session."""
    global default_form
    if session is None:
        default_form = None
    else:
        session_forms.pop(session, None)
