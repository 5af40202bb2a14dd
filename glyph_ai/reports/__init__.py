from .decision_report import CandidateDiag, CascadeStep, DecisionReport, build_decision_report

__all__ = ["CandidateDiag", "CascadeStep", "DecisionReport", "build_decision_report"]
