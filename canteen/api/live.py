"""
Live updates over WebSocket
"""
import asyncio
import logging
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)

router = APIRouter(tags=["live"])

@router.websocket("/live/{user_id}")
async def live_updates(websocket: WebSocket, user_id: str):
    """Push the menu and the user's notifications whenever they change.

    Storage is polled every POLL_INTERVAL_SECONDS; any message from the
    client triggers an immediate re-poll.
    """
    live = websocket.app.state.services.live
    await websocket.accept()
    previous = None
    try:
        while True:
            snapshot = await live.snapshot(user_id)
            if snapshot != previous:
                await websocket.send_json(snapshot)
                previous = snapshot
            try:
                await asyncio.wait_for(websocket.receive_text(), timeout=live.interval)
            except asyncio.TimeoutError:
                pass
    except WebSocketDisconnect:
        logger.info("Live updates closed for %s", user_id)
