# portfolio/defaults.py: built-in catalog used when no content file is supplied
# ------------------------------------------------------------------------------

from __future__ import annotations
from typing import Tuple

from portfolio.models import Category, Project

DEFAULT_PROJECTS: Tuple[Project, ...] = (
    Project(
        id="1",
        title="E-commerce Sales Dashboard",
        description="Interactive dashboard visualizing sales trends, customer behavior, and product performance for an e-commerce platform.",
        category=Category.DASHBOARD,
        image="https://images.unsplash.com/photo-1551288049-bebda4e38f71?w=800&q=80",
        tools=("Tableau", "SQL", "Excel"),
        objectives=(
            "Give the sales team a single daily view of revenue and orders",
            "Surface under-performing product lines early",
        ),
        methodology="Nightly SQL extracts from the order database feed a Tableau data source; KPIs are defined once in a shared calculation layer and reused across every sheet.",
        findings=(
            "Weekend traffic converts 12% better than weekday traffic",
            "Three product lines account for 60% of returns",
        ),
        conclusion="The dashboard replaced four weekly spreadsheet reports and shortened the review meeting to fifteen minutes.",
    ),
    Project(
        id="2",
        title="Customer Segmentation Analysis",
        description="In-depth analysis of customer segments using clustering algorithms to identify key customer groups and their behaviors.",
        category=Category.ANALYSIS,
        image="https://images.unsplash.com/photo-1551434678-e076c223a692?w=800&q=80",
        tools=("Python", "Scikit-learn", "Pandas", "Matplotlib"),
        objectives=(
            "Group customers by purchasing behavior",
            "Describe each segment in terms marketing can act on",
        ),
        methodology="RFM features were engineered in Pandas, scaled, and clustered with k-means; the number of clusters was chosen with silhouette scores and checked against business intuition.",
        findings=(
            "Five stable segments emerged across two years of data",
            "The smallest segment produced a third of total revenue",
        ),
        conclusion="Segment labels are now attached to every customer record and drive the email campaign schedule.",
    ),
    Project(
        id="3",
        title="Global Supply Chain Visualization",
        description="Interactive visualization of global supply chain networks, highlighting bottlenecks and optimization opportunities.",
        category=Category.VISUALIZATION,
        image="https://images.unsplash.com/photo-1494412574643-ff11b0a5c1c3?w=800&q=80",
        tools=("D3.js", "JavaScript", "GeoJSON"),
        objectives=("Map supplier-to-warehouse flows", "Highlight routes with chronic delays"),
        methodology="Shipment records were aggregated per route and rendered as a force-directed network over a GeoJSON world map, with edge width encoding volume and color encoding delay.",
        findings=("Two transshipment ports caused most of the late deliveries",),
        conclusion="Rerouting a fifth of the volume through an alternative port cut average delay by four days.",
    ),
    Project(
        id="4",
        title="Predictive Maintenance Model",
        description="Machine learning model to predict equipment failures before they occur, reducing downtime and maintenance costs.",
        category=Category.ANALYSIS,
        image="https://images.unsplash.com/photo-1581094794329-c8112a89af12?w=800&q=80",
        tools=("Python", "TensorFlow", "Time Series Analysis"),
        objectives=("Predict failures at least 48 hours ahead",),
        methodology="Sensor time series were windowed and fed to an LSTM classifier; evaluation used a time-based split to avoid leakage.",
        findings=("Recall of 0.82 at a 48-hour horizon", "Vibration features carried most of the signal"),
        conclusion="The model now schedules inspections for the highest-risk machines each week.",
    ),
    Project(
        id="5",
        title="Marketing Campaign Performance",
        description="Comprehensive dashboard tracking marketing campaign performance across multiple channels and customer segments.",
        category=Category.DASHBOARD,
        image="https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=800&q=80",
        tools=("Power BI", "Google Analytics", "R"),
        objectives=("Compare channel ROI on one page", "Track campaign spend against budget"),
        methodology="Google Analytics exports and ad-platform spend were joined in R and published to Power BI with row-level security per team.",
        findings=("Paid social returned less than half the ROI of email",),
        conclusion="Budget for the next quarter was reallocated using the dashboard's channel comparison.",
    ),
    Project(
        id="6",
        title="Social Media Sentiment Analysis",
        description="Real-time analysis of social media sentiment for brand monitoring and reputation management.",
        category=Category.VISUALIZATION,
        image="https://images.unsplash.com/photo-1611162617213-7d7a39e9b1d7?w=800&q=80",
        tools=("Python", "NLTK", "Plotly", "Twitter API"),
        objectives=("Score brand mentions as they arrive", "Alert on sudden sentiment drops"),
        methodology="Mentions were streamed from the Twitter API, scored with a VADER model from NLTK, and plotted as rolling averages in Plotly.",
        findings=("Negative spikes lagged product incidents by about two hours",),
        conclusion="The alerting view gives the support team a head start on emerging complaints.",
    ),
)

# Shown by the detail view when a requested project id cannot be resolved.
DEFAULT_DETAIL_PROJECT = Project(
    id="default-project",
    title="E-commerce Customer Behavior Analysis",
    description="A comprehensive analysis of customer behavior patterns for an e-commerce platform, identifying key trends and providing actionable insights.",
    category=Category.ANALYSIS,
    image="https://images.unsplash.com/photo-1551288049-bebda4e38f71?w=800&q=80",
    tools=("Python", "Pandas", "Matplotlib", "SQL", "Tableau"),
    objectives=(
        "Identify key customer segments based on purchasing behavior",
        "Analyze seasonal trends in product categories",
        "Determine factors influencing cart abandonment",
        "Provide recommendations for improving conversion rates",
    ),
    methodology="This analysis utilized a combination of SQL queries for data extraction, Python for data cleaning and statistical analysis, and Tableau for visualization. The dataset included 12 months of customer transactions, browsing behavior, and demographic information.",
    findings=(
        "Identified 4 distinct customer segments with unique purchasing patterns",
        "Discovered 23% higher conversion rates for customers using mobile app vs website",
        "Found significant seasonal variations in electronics and apparel categories",
        "Cart abandonment rates peaked during checkout when shipping costs were revealed",
    ),
    conclusion="The analysis revealed several opportunities for improving customer engagement and conversion rates. By implementing targeted marketing strategies for identified customer segments and addressing key pain points in the checkout process, the client could potentially increase conversion rates by 15-20%.",
    link="https://example.com/project",
    download_link="assets/reports/project-report.pdf",
)
