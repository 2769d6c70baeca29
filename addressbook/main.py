import io
from typing import List, Optional, Tuple

from fastapi import FastAPI, UploadFile, File, HTTPException
from .models import CitiesResponse, Contact, HealthResponse, LoadResponse, QueryResponse
from .loader import decode_upload, load_with_report
from .queries import (
    filter_by_city,
    filter_by_phone_prefix,
    group_count_by_city,
    search_by_name,
    sorted_by_name,
    unique_cities,
)

app = FastAPI(
    title="addressbook",
    description="In-memory address book over uploaded contact CSVs",
    version="0.1.0",
)


async def _load_upload(file: UploadFile) -> Tuple[List[Contact], List[dict]]:
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    return load_with_report(io.StringIO(decode_upload(raw), newline=None))


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/contacts", response_model=LoadResponse)
async def load_contacts(file: UploadFile = File(...)):
    contacts, skipped = await _load_upload(file)
    return {
        "contacts": contacts,
        "summary": {
            "contacts": len(contacts),
            "skipped": len(skipped),
            "cities": len(unique_cities(contacts)),
        },
        "skipped": skipped,
    }


@app.post("/contacts/query", response_model=QueryResponse)
async def query_contacts(
    file: UploadFile = File(...),
    name: Optional[str] = None,
    city: Optional[str] = None,
    phone_prefix: Optional[str] = None,
    sort: bool = False,
):
    contacts, _ = await _load_upload(file)

    # Absent parameters do not filter.
    if name is not None:
        contacts = search_by_name(contacts, name)
    if city is not None:
        contacts = filter_by_city(contacts, city)
    if phone_prefix is not None:
        contacts = filter_by_phone_prefix(contacts, phone_prefix)
    if sort:
        contacts = sorted_by_name(contacts)

    return {"count": len(contacts), "contacts": contacts}


@app.post("/contacts/cities", response_model=CitiesResponse)
async def contact_cities(file: UploadFile = File(...)):
    contacts, _ = await _load_upload(file)
    return {
        "unique_cities": unique_cities(contacts),
        "counts": group_count_by_city(contacts),
    }
