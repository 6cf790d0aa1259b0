from typing import Dict, List, Union

from fastapi import Request

from infrastructure.context import USUARIOS
from routers.records import build_record_router

router = build_record_router(USUARIOS)


@router.get("/{year}/{month}", summary="Echo the query string parameters")
async def echo_query(year: str, month: str, request: Request) -> Dict[str, Union[str, List[str]]]:
    """
    Return the query string as an object, e.g.
    ``/api/usuarios/1990/2?nombre=xxxx&single=y``. Repeated keys become lists.
    """
    params: Dict[str, Union[str, List[str]]] = {}
    for key, value in request.query_params.multi_items():
        if key not in params:
            params[key] = value
        elif isinstance(params[key], list):
            params[key].append(value)
        else:
            params[key] = [params[key], value]
    return params
