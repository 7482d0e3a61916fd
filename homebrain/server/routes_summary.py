"""
Family summary REST API routes.
"""

from fastapi import APIRouter, Depends, HTTPException

from homebrain.errors import LLMError, NotFoundError
from homebrain.server.app import get_actor_id, get_services
from homebrain.server.schemas import DailyBriefResponse, MoodResponse, WeeklyRecapResponse
from homebrain.services import Services
from homebrain.summary import Mood, mood_suggestions

router = APIRouter()


@router.get("/daily", response_model=DailyBriefResponse)
async def daily_brief(
    actor_id: int = Depends(get_actor_id),
    services: Services = Depends(get_services),
) -> DailyBriefResponse:
    """Today's brief for the caller's family."""
    try:
        brief = await services.summaries.daily_brief(actor_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LLMError:
        raise HTTPException(status_code=500, detail="Unable to generate summary")

    return DailyBriefResponse(
        date=brief.date,
        summary=brief.summary,
        event_count=brief.event_count,
        task_count=brief.task_count,
        meal_count=brief.meal_count,
    )


@router.get("/weekly", response_model=WeeklyRecapResponse)
async def weekly_recap(
    actor_id: int = Depends(get_actor_id),
    services: Services = Depends(get_services),
) -> WeeklyRecapResponse:
    """This week's recap for the caller's family."""
    try:
        recap = await services.summaries.weekly_recap(actor_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LLMError:
        raise HTTPException(status_code=500, detail="Unable to generate recap")

    return WeeklyRecapResponse(
        week_start=recap.week_start,
        week_end=recap.week_end,
        summary=recap.summary,
        event_count=recap.event_count,
        tasks_completed=recap.tasks_completed,
    )


@router.get("/mood/{mood}", response_model=MoodResponse)
async def mood(mood: Mood) -> MoodResponse:
    """Suggestions for the family's current mood."""
    result = mood_suggestions(mood)
    return MoodResponse(
        mood=result.mood.value,
        suggestion=result.suggestion,
        recommendations=result.recommendations,
    )
