from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from multilingua.dependencies import get_query_engine, get_store
from multilingua.schemas import SubjectCreate, SubjectResponse
from multilingua.services.query_service import QueryEngine
from multilingua.storage.base import CatalogStore

router = APIRouter()


@router.get("", response_model=List[SubjectResponse])
async def list_subjects(queries: QueryEngine = Depends(get_query_engine)):
    return await queries.get_all_subjects()


@router.post("", response_model=SubjectResponse, status_code=status.HTTP_201_CREATED)
async def create_subject(subject: SubjectCreate, store: CatalogStore = Depends(get_store)):
    return await store.create_subject(subject)


@router.get("/{slug}", response_model=SubjectResponse)
async def get_subject(slug: str, queries: QueryEngine = Depends(get_query_engine)):
    subject = await queries.get_subject_by_slug(slug)
    if subject is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")
    return subject
