"""Form submission endpoint"""
from fastapi import APIRouter, Request
import logging

from app.services.dispatcher import dispatcher

logger = logging.getLogger(__name__)
router = APIRouter()

# Every method is routed to the dispatcher so non-POST requests get the
# JSON 405 envelope instead of the framework default.
SUBMIT_METHODS = ["POST", "GET", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/submit", methods=SUBMIT_METHODS)
async def submit_form(request: Request):
    """Handle form submission (PUBLIC endpoint)"""
    body = await request.body()
    result = await dispatcher.handle(request.method, body)
    return result.to_json_response()


@router.get("/available")
async def list_forms():
    """List configured forms and their fields"""
    forms = []
    for form_id in dispatcher.registry.available_forms():
        schema = dispatcher.registry.lookup(form_id)
        forms.append({
            "form_id": schema.id,
            "required_fields": list(schema.required_fields),
            "optional_fields": list(schema.optional_fields),
        })
    return {"forms": forms}
