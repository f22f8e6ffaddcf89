class LifecycleStage:
    ACTIVE = "active"
    DELETED = "deleted"
