"""Static guidance served by the ATS and cover-letter routes."""

ATS_TIPS = [
    {
        "category": "Formatting",
        "tips": [
            "Use standard fonts like Arial, Calibri, or Times New Roman",
            "Avoid tables, text boxes, and complex layouts",
            'Use standard section headings like "Experience", "Education", "Skills"',
            "Save as PDF to preserve formatting",
        ],
    },
    {
        "category": "Keywords",
        "tips": [
            "Include exact keywords from the job description",
            'Use both acronyms and full forms (e.g., "AI" and "Artificial Intelligence")',
            "Include industry-specific terminology",
            "Match the language used in the job posting",
        ],
    },
    {
        "category": "Content",
        "tips": [
            "Quantify achievements with numbers and percentages",
            "Use action verbs to start bullet points",
            "Include relevant certifications and licenses",
            "Tailor content to match job requirements",
        ],
    },
    {
        "category": "Structure",
        "tips": [
            "Start with contact information at the top",
            "Include a professional summary or objective",
            "List experience in reverse chronological order",
            "Keep resume to 1-2 pages maximum",
        ],
    },
]

COVER_LETTER_TEMPLATES = [
    {
        "id": "professional",
        "name": "Professional",
        "description": "A formal, business-appropriate template",
        "tone": "professional",
        "preview": "Dear Hiring Manager,\n\nI am writing to express my strong interest in the [Job Title] position at [Company Name]...",
    },
    {
        "id": "enthusiastic",
        "name": "Enthusiastic",
        "description": "An energetic template showing passion",
        "tone": "enthusiastic",
        "preview": "Dear Hiring Team,\n\nI am thrilled to apply for the [Job Title] role at [Company Name]! Your company's mission...",
    },
    {
        "id": "creative",
        "name": "Creative",
        "description": "A unique approach for creative roles",
        "tone": "creative",
        "preview": "Hello [Company Name] Team,\n\nWhen I discovered the [Job Title] opening at [Company Name], I knew this was the opportunity...",
    },
    {
        "id": "formal",
        "name": "Formal",
        "description": "Traditional and conservative approach",
        "tone": "formal",
        "preview": "Dear Sir/Madam,\n\nI am writing to formally apply for the position of [Job Title] at [Company Name]...",
    },
]

COVER_LETTER_TIPS = [
    {
        "category": "Structure",
        "tips": [
            "Start with your contact information and the date",
            "Address the hiring manager by name if possible",
            "Keep it to one page maximum",
            "Use 3-4 paragraphs with clear structure",
        ],
    },
    {
        "category": "Content",
        "tips": [
            "Customize each cover letter for the specific job",
            "Highlight your most relevant achievements",
            "Show knowledge about the company and role",
            "Explain why you want to work for this specific company",
        ],
    },
    {
        "category": "Writing Style",
        "tips": [
            "Use active voice and strong action verbs",
            "Be specific with examples and numbers",
            "Match the tone to the company culture",
            "Proofread carefully for grammar and spelling",
        ],
    },
    {
        "category": "Common Mistakes",
        "tips": [
            "Don't repeat everything from your resume",
            "Avoid generic, one-size-fits-all letters",
            "Don't focus only on what you want from the job",
            "Don't use overly casual language unless appropriate",
        ],
    },
]

DEFAULT_PROFILE = {
    "name": "John Doe",
    "email": "john.doe@example.com",
    "phone": "+1 (555) 123-4567",
    "location": "San Francisco, CA",
    "bio": "Experienced software developer passionate about creating innovative solutions.",
}

DEFAULT_NOTIFICATIONS = {
    "emailNotifications": True,
    "pushNotifications": False,
    "jobAlerts": True,
    "weeklyReports": True,
}
