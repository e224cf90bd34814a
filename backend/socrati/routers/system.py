import time

from fastapi import APIRouter

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/wake-up")
def wake_up():
	# Polled by the front-end so the hosting platform does not idle the server
	return {"status": "awake", "timestamp": int(time.time() * 1000)}
