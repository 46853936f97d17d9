from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import HTMLResponse
from typing import Optional

from ..enhancer import ResumeEnhancer, get_enhancer
from ..errors import EnhancementError, SessionNotFound, SessionStateError
from ..preview import render_preview
from ..schemas import FieldUpdate, ResumeDocument, SessionOut
from ..session import ResumeSession, SessionRegistry, get_sessions
from .routes_enhance import enhancement_failure, unexpected_failure

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _session(registry: SessionRegistry, session_id: str) -> ResumeSession:
    try:
        return registry.get(session_id)
    except SessionNotFound:
        raise HTTPException(404, "session not found")


def _run(fn, *args):
    try:
        return fn(*args)
    except SessionStateError as e:
        raise HTTPException(409, str(e))
    except IndexError as e:
        raise HTTPException(404, str(e))
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.post("", response_model=SessionOut)
def create_session(
    sample: bool = False,
    document: Optional[ResumeDocument] = Body(None),
    registry: SessionRegistry = Depends(get_sessions),
):
    s = registry.create(document)
    if sample:
        s.load_sample()
    return s.to_out()


@router.get("/{session_id}", response_model=SessionOut)
def get_session(session_id: str, registry: SessionRegistry = Depends(get_sessions)):
    return _session(registry, session_id).to_out()


@router.delete("/{session_id}")
def delete_session(session_id: str, registry: SessionRegistry = Depends(get_sessions)):
    try:
        registry.delete(session_id)
    except SessionNotFound:
        raise HTTPException(404, "session not found")
    return {"ok": True}


@router.get("/{session_id}/preview", response_class=HTMLResponse)
def preview_session(session_id: str, registry: SessionRegistry = Depends(get_sessions)):
    s = _session(registry, session_id)
    return HTMLResponse(render_preview(s.active_document()))


@router.post("/{session_id}/sample", response_model=SessionOut)
def load_sample(session_id: str, registry: SessionRegistry = Depends(get_sessions)):
    s = _session(registry, session_id)
    _run(s.load_sample)
    return s.to_out()


@router.post("/{session_id}/enhance", response_model=SessionOut)
async def enhance_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_sessions),
    enhancer: ResumeEnhancer = Depends(get_enhancer),
):
    s = _session(registry, session_id)
    try:
        await s.submit_for_enhancement(enhancer)
    except SessionStateError as e:
        raise HTTPException(409, str(e))
    except EnhancementError as e:
        return enhancement_failure(e)
    except Exception as e:
        return unexpected_failure(e)
    return s.to_out()


@router.post("/{session_id}/apply", response_model=SessionOut)
def apply_candidate(session_id: str, registry: SessionRegistry = Depends(get_sessions)):
    s = _session(registry, session_id)
    _run(s.apply)
    return s.to_out()


@router.post("/{session_id}/reject", response_model=SessionOut)
def reject_candidate(session_id: str, registry: SessionRegistry = Depends(get_sessions)):
    s = _session(registry, session_id)
    _run(s.reject)
    return s.to_out()


@router.put("/{session_id}/personal-info/{field}", response_model=SessionOut)
def update_personal_info(session_id: str, field: str, body: FieldUpdate,
                         registry: SessionRegistry = Depends(get_sessions)):
    s = _session(registry, session_id)
    _run(s.set_personal_field, field, body.value)
    return s.to_out()


@router.put("/{session_id}/skills/{index}", response_model=SessionOut)
def update_skill(session_id: str, index: int, body: FieldUpdate,
                 registry: SessionRegistry = Depends(get_sessions)):
    s = _session(registry, session_id)
    _run(s.set_skill, index, body.value)
    return s.to_out()


@router.put("/{session_id}/{section}/{index}/{field}", response_model=SessionOut)
def update_entry(session_id: str, section: str, index: int, field: str, body: FieldUpdate,
                 registry: SessionRegistry = Depends(get_sessions)):
    s = _session(registry, session_id)
    _run(s.set_entry_field, section, index, field, body.value)
    return s.to_out()


@router.post("/{session_id}/{section}", response_model=SessionOut)
def add_entry(session_id: str, section: str, registry: SessionRegistry = Depends(get_sessions)):
    s = _session(registry, session_id)
    _run(s.add_entry, section)
    return s.to_out()


@router.delete("/{session_id}/{section}/{index}", response_model=SessionOut)
def remove_entry(session_id: str, section: str, index: int,
                 registry: SessionRegistry = Depends(get_sessions)):
    s = _session(registry, session_id)
    _run(s.remove_entry, section, index)
    return s.to_out()
