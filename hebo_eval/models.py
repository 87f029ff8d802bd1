from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from enum import Enum
import time


class ComponentType(str, Enum):
    EVALUATION_RUNNER = "EvaluationRunner"
    SCORER = "Scorer"
    AGENT = "Agent"
    LOADER = "TestCaseLoader"
    CLI = "CLI"


class EventType(str, Enum):
    TEST_CASE_STARTED = "Test_Case_Started"
    TEST_CASE_COMPLETED = "Test_Case_Completed"
    TEST_CASE_FAILED = "Test_Case_Failed"
    AGENT_REQUEST = "Agent_Request"
    AGENT_RESPONSE = "Agent_Response"
    LOAD_ERROR = "Load_Error"
    EVALUATION_FINISHED = "Evaluation_Finished"


class LogEntry(BaseModel):
    trace_id: str
    timestamp: float = Field(default_factory=time.time)
    component: ComponentType
    event_type: EventType
    payload_hash: Optional[str] = None
    metrics: Dict[str, Any] = Field(default_factory=dict)
    message: Optional[str] = None
